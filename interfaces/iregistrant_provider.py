"""
Abstract interface for registrant identity providers.
"""

from abc import ABC, abstractmethod


class IRegistrantProvider(ABC):
    """Tells the registry which plugin is registering right now."""

    @abstractmethod
    def current_registrant(self) -> str:
        """
        Identify whoever is executing the current registration call.

        Returns:
            Stable registrant id
        """
        pass
