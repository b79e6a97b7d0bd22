"""Organization — the aggregate injected into every service.

The Organization owns the Directory Store, the Department Registry, and the
single re-entrant lock both of them share. :meth:`transaction` holds that
lock across a multi-step mutation so readers never observe a half-applied
change, such as a back-reference set before membership is recorded.

The core is synchronous; the lock only matters when an Organization is
shared between threads.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from orgdir.infrastructure.departments import DepartmentRegistry
from orgdir.infrastructure.directory import DirectoryStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from orgdir.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class Organization:
    """Directory Store + Department Registry behind one lock.

    Parameters:
        plugin_manager: Optional pluggy manager; lifecycle events are
            dropped when None.
    """

    def __init__(self, *, plugin_manager: PluginManager | None = None) -> None:
        self._lock = threading.RLock()
        self.directory = DirectoryStore(self._lock)
        self.departments = DepartmentRegistry(self._lock)
        self._plugin_manager = plugin_manager

    @property
    def plugin_manager(self) -> PluginManager | None:
        return self._plugin_manager

    def attach_plugins(self, plugin_manager: PluginManager) -> None:
        self._plugin_manager = plugin_manager

    @contextmanager
    def transaction(self) -> Iterator[Organization]:
        """Hold the organization lock for the duration of the block."""
        with self._lock:
            yield self

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> None:
        """Fire a lifecycle hook. No-op without a plugin manager.

        Plugin exceptions propagate; the service layer records them as warnings.
        """
        if self._plugin_manager is None:
            return
        self._plugin_manager.dispatch(hook_name, payload)
