"""structlog configuration for orgdir.

Two output modes, both on stderr:
- Human (default): console renderer, colored when attached to a TTY
- JSON (--log-json): one JSON object per line

Decimal values (salaries, percentages) are rendered as exact strings, and
every event carries the roster file it concerns when one is bound.
"""

from __future__ import annotations

import logging
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any

import structlog


def decimals_to_str(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Render Decimal values as plain strings so money keeps its exact digits."""
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    roster_path: Path | None = None,
) -> None:
    """Configure structlog processors and route stdlib logging through them.

    Args:
        verbose: DEBUG for the ``orgdir`` logger; WARNING otherwise.
        log_json: Use the JSON renderer instead of the console renderer.
        roster_path: Bound as ``roster`` on every event when given.
    """
    orgdir_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        decimals_to_str,
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("orgdir").setLevel(orgdir_level)

    structlog.contextvars.clear_contextvars()
    if roster_path is not None:
        structlog.contextvars.bind_contextvars(roster=str(roster_path))
