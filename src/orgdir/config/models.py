"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, ``orgdir.toml`` only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class RosterConfig(BaseModel):
    """[roster] section."""

    model_config = {"frozen": True}

    path: str = "roster.json"
    indent: int = 2


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
