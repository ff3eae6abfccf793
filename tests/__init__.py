"""
Test suite for the entity registry.
Provides shared builders for registry tests.
"""

from typing import Optional

from entity_registry import Registry, StatRecord
from host import EventBus, StaticRegistrantProvider

HEAD_DEFAULT = StatRecord("head", {"durability": 0, "mining_speed": 1.0})


def make_registry(registrant: str = "alpha", hook: Optional[EventBus] = None,
                  with_defaults: bool = True) -> Registry:
    """Create a registry reporting a fixed registrant, with head defaults registered."""
    registry = Registry(StaticRegistrantProvider(registrant), hook or EventBus())
    if with_defaults:
        registry.add_default_stats(HEAD_DEFAULT)
    return registry
