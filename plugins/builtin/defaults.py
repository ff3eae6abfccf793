"""
Default stats held by the fallback entity.
"""

from entity_registry import StatRecord

PLUGIN_ID = "defaults"

HEAD = StatRecord("head", {"durability": 0, "mining_speed": 1.0, "attack": 0.0, "harvest_level": 0})
HANDLE = StatRecord("handle", {"durability": 0, "modifier": 1.0})
EXTRA = StatRecord("extra", {"extra_durability": 0})


def register(registry) -> None:
    for stats in (HEAD, HANDLE, EXTRA):
        registry.add_default_stats(stats)
