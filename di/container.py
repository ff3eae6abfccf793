"""
Dependency injection container holding the host's single registry and its collaborators.
"""

from typing import Any, Callable, Dict, Type, TypeVar

T = TypeVar('T')

# Marks a singleton that has not been created yet
_PENDING = object()


class DIContainer:
    """Resolves components by the interface they were registered under."""

    def __init__(self):
        """Initialize an empty container."""
        self._providers: Dict[Type, Callable[[], Any]] = {}
        self._instances: Dict[Type, Any] = {}

    def register(self, interface: Type[T], provider: Callable[[], T],
                 singleton: bool = True) -> None:
        """
        Register a class or factory function for an interface.

        Args:
            interface: Type the component is resolved by
            provider: Zero-argument callable creating the component
            singleton: Keep the first created instance for later resolutions
        """
        self._providers[interface] = provider
        if singleton:
            self._instances[interface] = _PENDING
        else:
            self._instances.pop(interface, None)

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """Register a pre-created instance."""
        self._instances[interface] = instance

    def resolve(self, interface: Type[T]) -> T:
        """
        Resolve the component registered for an interface.

        Raises:
            ValueError: If nothing is registered for the interface
        """
        instance = self._instances.get(interface, _PENDING)
        if instance is not _PENDING:
            return instance

        provider = self._providers.get(interface)
        if provider is None:
            raise ValueError(f"Service not registered: {interface}")

        created = provider()
        if interface in self._instances:
            self._instances[interface] = created
        return created
