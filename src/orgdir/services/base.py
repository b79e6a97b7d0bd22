"""BaseService — foundation for orgdir services.

Every service receives an :class:`Organization` at construction time and
wraps multi-step mutations in ``self._org.transaction()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from orgdir.infrastructure.organization import Organization

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes."""

    def __init__(self, org: Organization) -> None:
        self._org = org

    @property
    def organization(self) -> Organization:
        return self._org

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Fire a lifecycle hook.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        try:
            self._org.dispatch(hook_name, payload)
        except Exception:
            logger.warning("Event dispatch failed for %s", hook_name, exc_info=True)
            warnings.append(f"Event dispatch failed for {hook_name}")
