"""
Tests for dependency wiring.
"""

import pytest

from di import ComponentFactory, DIContainer
from entity_registry import Registry
from host import ActivePluginTracker, EventBus
from interfaces import IEventHook, IRegistrantProvider
from plugins import LoadPhase, PluginRegistry


class TestDIContainer:
    """Test container registration and resolution."""

    def test_singleton_class(self):
        container = DIContainer()
        container.register(IEventHook, EventBus)

        first = container.resolve(IEventHook)

        assert isinstance(first, EventBus)
        assert container.resolve(IEventHook) is first

    def test_transient_provider(self):
        container = DIContainer()
        container.register(IEventHook, EventBus, singleton=False)

        assert container.resolve(IEventHook) is not container.resolve(IEventHook)

    def test_factory_function_and_instance(self):
        """Test factory functions and pre-created instances resolve."""
        container = DIContainer()
        tracker = ActivePluginTracker("host")
        container.register_instance(IRegistrantProvider, tracker)
        container.register(Registry, lambda: Registry(container.resolve(IRegistrantProvider)))

        registry = container.resolve(Registry)

        assert container.resolve(IRegistrantProvider) is tracker
        assert registry.registrant_provider is tracker
        assert container.resolve(Registry) is registry

    def test_reregister_as_transient_drops_singleton(self):
        container = DIContainer()
        container.register(IEventHook, EventBus)
        container.resolve(IEventHook)
        container.register(IEventHook, EventBus, singleton=False)

        assert container.resolve(IEventHook) is not container.resolve(IEventHook)

    def test_unregistered_service(self):
        container = DIContainer()

        with pytest.raises(ValueError, match="not registered"):
            container.resolve(Registry)


class TestComponentFactory:
    """Test the host wiring."""

    def test_build_shares_one_registry(self):
        """Test the load phase and registry share collaborators."""
        container = ComponentFactory().build(["plugins.builtin.defaults"])

        registry = container.resolve(Registry)
        phase = container.resolve(LoadPhase)

        assert phase.registry is registry
        assert phase.tracker is registry.registrant_provider
        assert isinstance(registry.event_hook, EventBus)
        assert container.resolve(PluginRegistry).list_plugins() == ["defaults"]

    def test_build_and_run(self):
        """Test a built container runs the shipped plugins end to end."""
        container = ComponentFactory().build(["plugins.builtin.defaults", "plugins.builtin.metals"])

        report = container.resolve(LoadPhase).run()

        assert report.ok
        assert container.resolve(Registry).get_registrant("iron") == "metals"
