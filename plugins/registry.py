"""
Plugin registry for discovering registration plugins from module paths.
"""

import importlib
import logging
from types import ModuleType
from typing import Any, Callable, Dict, Iterable, List, Optional

from interfaces import IRegistryPlugin

logger = logging.getLogger(__name__)


class ModulePlugin(IRegistryPlugin):
    """Adapts a module exposing ``PLUGIN_ID`` and ``register(registry)``."""

    def __init__(self, plugin_id: str, register: Callable[[Any], None], module_path: str = ""):
        self._plugin_id = plugin_id
        self._register = register
        self.module_path = module_path

    @property
    def plugin_id(self) -> str:
        return self._plugin_id

    def register(self, registry: Any) -> None:
        self._register(registry)


class PluginRegistry:
    """Registry for managing registration plugins and their discovery."""

    def __init__(self):
        """Initialize plugin registry."""
        self._plugins: Dict[str, IRegistryPlugin] = {}
        # module path -> error message for modules that could not be loaded
        self.discovery_errors: Dict[str, str] = {}

    def discover(self, module_paths: Iterable[str]) -> List[str]:
        """
        Import plugin modules and register the plugins they expose.

        A module exposes either ``PLUGIN`` (an IRegistryPlugin) or a
        ``PLUGIN_ID`` string with a module-level ``register`` function.

        Args:
            module_paths: Dotted module paths, in load order

        Returns:
            Ids of the plugins registered by this call
        """
        discovered = []
        for module_path in module_paths:
            try:
                module = importlib.import_module(module_path)
                plugin = self._plugin_from_module(module)
                self.register_plugin(plugin)
                discovered.append(plugin.plugin_id)
            except ImportError as e:
                logger.warning(f"Plugin module not available: {module_path} ({e})")
                self.discovery_errors[module_path] = f"Plugin module not available: {e}"
            except (AttributeError, ValueError) as e:
                logger.warning(f"Failed to load plugin {module_path}: {e}")
                self.discovery_errors[module_path] = str(e)

        logger.info(f"Plugin discovery completed: {len(discovered)} plugin(s)")
        return discovered

    def register_plugin(self, plugin: IRegistryPlugin) -> None:
        """
        Register a plugin.

        Args:
            plugin: Plugin instance

        Raises:
            ValueError: If a plugin with the same id is already registered
        """
        plugin_id = plugin.plugin_id
        if plugin_id in self._plugins:
            raise ValueError(f"Duplicate plugin id: {plugin_id}")
        self._plugins[plugin_id] = plugin
        logger.debug(f"Registered plugin: {plugin_id}")

    def get_plugin(self, plugin_id: str) -> Optional[IRegistryPlugin]:
        return self._plugins.get(plugin_id)

    def list_plugins(self) -> List[str]:
        """
        List registered plugins.

        Returns:
            Plugin ids in load order
        """
        return list(self._plugins.keys())

    def plugins(self) -> List[IRegistryPlugin]:
        return list(self._plugins.values())

    def _plugin_from_module(self, module: ModuleType) -> IRegistryPlugin:
        plugin = getattr(module, "PLUGIN", None)
        if plugin is not None:
            if not isinstance(plugin, IRegistryPlugin):
                raise AttributeError(f"{module.__name__}: PLUGIN must implement IRegistryPlugin")
            return plugin

        plugin_id = getattr(module, "PLUGIN_ID", None)
        register = getattr(module, "register", None)
        if not plugin_id or not callable(register):
            raise AttributeError(f"{module.__name__} must define PLUGIN or PLUGIN_ID and register()")
        return ModulePlugin(plugin_id, register, module.__name__)
