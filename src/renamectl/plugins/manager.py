"""Plugin registry bound to the rename hook specifications.

Installed packages contribute plugins through the ``renamectl.plugins``
entry-point group. UI layers and built-ins register instances directly.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from renamectl.plugins.hookspecs import RenameHookSpec

PROJECT_NAME = "renamectl"
ENTRY_POINT_GROUP = "renamectl.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Wraps :class:`pluggy.PluginManager` with discovery and naming rules."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RenameHookSpec)
        self._discovered = False

    @property
    def hook(self) -> pluggy.HookRelay:
        return self._pm.hook

    @property
    def is_loaded(self) -> bool:
        """Whether entry-point discovery has run."""
        return self._discovered

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and return the names of all registered plugins.

        An entry point may name a class; it is replaced by an instance, or
        dropped with a warning if it cannot be constructed without arguments.
        """
        loaded = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d plugin(s) from %s", loaded, ENTRY_POINT_GROUP)
        for plugin in [p for p in self._pm.get_plugins() if inspect.isclass(p)]:
            self._instantiate(plugin)
        self._discovered = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> str | None:
        """Register *plugin* under *name* (default: its class name)."""
        registered = self._pm.register(plugin, name=name or type(plugin).__name__)
        logger.debug("Registered plugin: %s", registered)
        return registered

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def get_plugins(self) -> list[object]:
        return [plugin for _, plugin in self._pm.list_name_plugin()]

    def list_plugin_names(self) -> list[str]:
        return [name for name, _ in self._pm.list_name_plugin()]

    def _instantiate(self, plugin_cls: type) -> None:
        name = self._pm.get_name(plugin_cls) or plugin_cls.__name__
        self._pm.unregister(plugin_cls)
        try:
            instance = plugin_cls()
        except Exception:
            logger.warning("Dropping plugin %s: cannot instantiate", name, exc_info=True)
            return
        self._pm.register(instance, name=name)
