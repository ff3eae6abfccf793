"""
Abstract interface for registration event hooks.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from entity_registry.events import EventKind, HookResult, RegistrationEvent


class IEventHook(ABC):
    """Observes registrations before they commit and may veto them."""

    @abstractmethod
    def notify(self, kind: "EventKind", event: "RegistrationEvent") -> "HookResult":
        """
        Announce a candidate registration.

        Only STAT_REGISTER results may carry a replacement payload; the
        registry ignores replacements for the other kinds.

        Args:
            kind: Registration step being announced
            event: Candidate entity and sub-record

        Returns:
            HookResult telling the registry to proceed, veto, or use a replacement payload
        """
        pass
