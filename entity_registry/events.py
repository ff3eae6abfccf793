"""
Registration notifications passed to the event hook before a commit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class EventKind(Enum):
    """Registration steps that are announced to the event hook."""
    ENTITY_REGISTER = "entity_register"
    STAT_REGISTER = "stat_register"
    TRAIT_REGISTER = "trait_register"


@dataclass(frozen=True)
class RegistrationEvent:
    """
    Candidate registration.

    ``record`` is the stat block or trait for sub-record events and None for
    entity registrations.
    """
    kind: EventKind
    entity: Any
    record: Optional[Any] = None

    @property
    def identifier(self) -> str:
        return self.entity.identifier


@dataclass(frozen=True)
class HookResult:
    """Outcome of an event hook notification."""
    vetoed: bool = False
    replacement: Optional[Any] = None
    reason: str = ""

    @classmethod
    def allow(cls) -> "HookResult":
        return cls()

    @classmethod
    def veto(cls, reason: str = "") -> "HookResult":
        return cls(vetoed=True, reason=reason)

    @classmethod
    def override(cls, replacement: Any) -> "HookResult":
        return cls(replacement=replacement)
