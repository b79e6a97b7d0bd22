"""Extension layer — lifecycle hooks via pluggy.

Discovery: entry_points (pip-installed) under the ``orgdir.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from orgdir.plugins.manager import PluginManager

__all__ = ["PluginManager"]
