"""Plugin discovery, registration, and synchronous hook dispatch."""

from __future__ import annotations

import logging
from typing import Any

import pluggy

from orgdir.plugins.hookspecs import OrgdirHookSpec

PROJECT_NAME = "orgdir"
ENTRY_POINT_GROUP = "orgdir.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(OrgdirHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load pip-installed plugins from the ``orgdir.plugins`` entry-point group.

        Returns a list of registered plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> None:
        """Call every implementation of *hook_name* with *payload* as kwargs.

        Raises whatever a plugin raises; callers turn that into a warning.
        """
        hook = getattr(self._pm.hook, hook_name)
        hook(**payload)
