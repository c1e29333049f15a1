"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Notification failures are warnings, never errors.
"""

from contentmenu.plugins.manager import PluginManager, create_plugin_manager

__all__ = ["PluginManager", "create_plugin_manager"]
