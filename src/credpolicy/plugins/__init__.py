"""Extension layer — host hooks and handler chaining via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Any handler's veto is final; the first failed result wins.
"""

from credpolicy.plugins.host import PolicyHost
from credpolicy.plugins.manager import PluginHandle, PluginManager

__all__ = ["PluginHandle", "PluginManager", "PolicyHost"]
