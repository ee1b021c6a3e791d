"""Plugin discovery, registration, and hook relay.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints
in the ``credpolicy.plugins`` group. Registration hands back a
:class:`PluginHandle`; teardown goes through that handle rather than
relying on install/restore order.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass

import pluggy

from credpolicy.plugins.hookspecs import PROJECT_NAME, CredPolicyHookSpec

ENTRY_POINT_GROUP = "credpolicy.plugins"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PluginHandle:
    """Returned by registration; pass it back to unregister."""

    name: str
    plugin: object


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(CredPolicyHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load plugins advertised under the ``credpolicy.plugins`` entry-point group.

        Returns a list of registered plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> PluginHandle:
        """Register a plugin instance and return its handle.

        Raises:
            ValueError: If the plugin or the name is already registered.
        """
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)
        return PluginHandle(name=resolved_name, plugin=plugin)

    def unregister(self, handle: PluginHandle) -> None:
        """Unregister the plugin behind *handle*. Unknown handles are ignored."""
        if not self._pm.is_registered(handle.plugin):
            logger.debug("Plugin already unregistered: %s", handle.name)
            return
        self._pm.unregister(handle.plugin)
        logger.debug("Unregistered plugin: %s", handle.name)

    def is_registered(self, handle: PluginHandle) -> bool:
        return self._pm.is_registered(handle.plugin)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("credpolicy")`` sets a ``credpolicy_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, f"{PROJECT_NAME}_impl", None):
                return True
        return False
