"""
Component factories wiring the registry to its collaborators.
"""

from typing import Iterable, Optional

from config.settings import settings
from entity_registry import Registry
from host import ActivePluginTracker, EventBus
from interfaces import IEventHook, IRegistrantProvider
from plugins.loader import LoadPhase
from plugins.registry import PluginRegistry
from .container import DIContainer


class ComponentFactory:
    """Factory for creating component implementations."""

    def __init__(self, container: Optional[DIContainer] = None):
        """
        Initialize component factory.

        Args:
            container: Container to populate, a new one if None
        """
        self.container = container or DIContainer()

    def create_registrant_provider(self) -> ActivePluginTracker:
        """Create the tracker reporting the active plugin."""
        return ActivePluginTracker(settings.HOST_REGISTRANT)

    def create_event_hook(self) -> IEventHook:
        """Create the event hook notified before commits."""
        return EventBus()

    def create_registry(self) -> Registry:
        """Create a registry bound to the container's collaborators."""
        return Registry(
            registrant_provider=self.container.resolve(IRegistrantProvider),
            event_hook=self.container.resolve(IEventHook)
        )

    def create_load_phase(self) -> LoadPhase:
        """Create the load phase over the container's registry and plugins."""
        return LoadPhase(
            registry=self.container.resolve(Registry),
            tracker=self.container.resolve(IRegistrantProvider),
            plugin_registry=self.container.resolve(PluginRegistry)
        )

    def build(self, plugin_modules: Optional[Iterable[str]] = None) -> DIContainer:
        """
        Register every component and discover plugins.

        Args:
            plugin_modules: Plugin module paths, defaults to settings

        Returns:
            Populated container
        """
        self.container.register(IRegistrantProvider, self.create_registrant_provider)
        self.container.register(IEventHook, self.create_event_hook)
        self.container.register(Registry, self.create_registry)
        self.container.register(PluginRegistry, PluginRegistry)
        self.container.register(LoadPhase, self.create_load_phase)

        modules = settings.plugin_modules() if plugin_modules is None else list(plugin_modules)
        self.container.resolve(PluginRegistry).discover(modules)
        return self.container
