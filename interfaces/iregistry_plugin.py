"""
Abstract interface for plugins that contribute registry content.
"""

from abc import ABC, abstractmethod
from typing import Any


class IRegistryPlugin(ABC):
    """A plugin run once during the load phase."""

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Registrant id recorded as provenance for this plugin's registrations."""
        pass

    @abstractmethod
    def register(self, registry: Any) -> None:
        """
        Contribute entities, stats and traits.

        Args:
            registry: Registry owned by the host for this load phase
        """
        pass
