"""The contentmenu plugin host.

Plugins come from two places: distributions advertising the
``contentmenu.plugins`` entry point, and single-file modules dropped into
a site's ``.contentmenu/plugins/`` directory. Filter hooks are threaded
by :meth:`PluginManager.apply_filters`; notification hooks go through
:meth:`PluginManager.notify`.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType
from typing import Any

import pluggy

from contentmenu.plugins.hookspecs import ContentMenuHookSpec

PROJECT_NAME = "contentmenu"
ENTRY_POINT_GROUP = "contentmenu.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """A pluggy manager bound to the contentmenu hook specifications."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ContentMenuHookSpec)
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins, then the modules in *local_dir*.

        Returns the names of every registered plugin afterwards.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_class_plugins()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin %s", name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or type(p).__name__ for p in self._pm.get_plugins()]

    def apply_filters(self, hook_name: str, text: str, **kwargs: Any) -> str:
        """Thread *text* through every implementation of a filter hook.

        Implementations run in pluggy's call order (last registered first)
        and receive only the arguments they declare. An implementation
        returning ``None`` leaves the value unchanged. Wrapper implementations
        (``wrapper=True`` or ``hookwrapper=True``) have no value to hand on and
        are skipped. Exceptions propagate: a broken filter must not leak
        unfiltered text.
        """
        caller: pluggy.HookCaller = getattr(self._pm.hook, hook_name)
        value = text
        for impl in reversed(caller.get_hookimpls()):
            if impl.wrapper or impl.hookwrapper:
                continue
            available = {"text": value, **kwargs}
            result = impl.function(**{name: available[name] for name in impl.argnames})
            if result is not None:
                value = result
        return value

    def notify(self, hook_name: str, **kwargs: Any) -> None:
        """Fire a notification hook and discard its results.

        A failing plugin is logged as a warning; rendering carries on.
        """
        try:
            getattr(self._pm.hook, hook_name)(**kwargs)
        except Exception:
            logger.warning("Plugin hook %s failed", hook_name, exc_info=True)

    # ------------------------------------------------------------------
    # Discovery helpers
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Register hook-carrying classes from the ``*.py`` files in *local_dir*.

        ``_``-prefixed files are skipped. A file that fails to import, or a
        class that fails to construct, costs a warning and nothing else.
        """
        if not local_dir.is_dir():
            return
        for path in sorted(local_dir.glob("*.py")):
            if path.name.startswith("_"):
                continue
            module = _load_local_module(path)
            if module is None:
                continue
            for cls in _plugin_classes(module):
                name = f"{module.__name__}.{cls.__name__}"
                try:
                    self.register_plugin(cls(), name=name)
                except Exception:
                    logger.warning("Failed to register plugin %s", name, exc_info=True)

    def _instantiate_class_plugins(self) -> None:
        """Swap plugin classes registered by entry points for instances.

        Hooks dispatched on a bare class would be called without ``self``.
        """
        for plugin in list(self._pm.get_plugins()):
            if not (inspect.isclass(plugin) and _carries_hooks(plugin)):
                continue
            name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                self._pm.register(plugin(), name=name)
            except Exception:
                logger.warning("Dropped entry-point plugin %s", name, exc_info=True)


def _load_local_module(path: Path) -> ModuleType | None:
    """Import *path* as ``contentmenu_local_plugin_<stem>``, or return None."""
    module_name = f"contentmenu_local_plugin_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        logger.warning("Failed to load local plugin %s: not importable", path)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        logger.warning("Failed to load local plugin %s", path, exc_info=True)
        return None
    return module


def _plugin_classes(module: ModuleType) -> Iterator[type]:
    """Yield classes defined in *module* (not imported into it) with hookimpls."""
    for _, cls in inspect.getmembers(module, inspect.isclass):
        if cls.__module__ == module.__name__ and _carries_hooks(cls):
            yield cls


def _carries_hooks(cls: type) -> bool:
    # HookimplMarker("contentmenu") tags decorated functions with contentmenu_impl.
    return any(
        getattr(getattr(cls, attr, None), f"{PROJECT_NAME}_impl", None)
        for attr in dir(cls)
        if not attr.startswith("_")
    )


def create_plugin_manager(*, local_dir: Path | None = None) -> PluginManager:
    """Build a manager with the built-in plugins plus discovered ones."""
    from contentmenu.plugins.builtins.autop import AutoParagraphPlugin

    pm = PluginManager()
    pm.register_plugin(AutoParagraphPlugin(), name="autop")
    pm.discover_and_load(local_dir=local_dir)
    return pm
