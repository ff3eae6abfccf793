"""
Record types stored by the registry.

The registry only relies on the ``identifier`` attribute of the records it is
given; these dataclasses are the default shapes used by the host and plugins.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from config.settings import settings


@dataclass(frozen=True)
class Entity:
    """A named record registered once per identifier (e.g. a material)."""
    identifier: str
    properties: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StatRecord:
    """A stat block attached to an entity. ``identifier`` is the stat kind."""
    identifier: str
    values: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


@dataclass(frozen=True)
class Trait:
    """A trait definition shared by every entity it is attached to."""
    identifier: str
    description: str = ""


@dataclass(frozen=True)
class Tool:
    """A tool built from entities; kept in an insertion-ordered set."""
    identifier: str
    components: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Modifier:
    """A modifier; later registrations replace earlier ones."""
    identifier: str
    description: str = ""


# Returned for unknown identifiers and holds the default stats of every kind
UNKNOWN = Entity(settings.FALLBACK_ENTITY_IDENTIFIER, {"sentinel": True})
