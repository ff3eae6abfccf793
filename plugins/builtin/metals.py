"""
Example content plugin contributing metal entities, their stats and traits.
"""

from typing import Any

from entity_registry import Entity, Modifier, StatRecord, Tool, Trait
from interfaces import IRegistryPlugin

MALLEABLE = Trait("malleable", "Repairs itself slowly")
MAGNETIC = Trait("magnetic", "Pulls nearby items")


class MetalsPlugin(IRegistryPlugin):
    """Plugin for the basic metals."""

    def __init__(self):
        """Initialize metals plugin."""
        self.name = "metals"
        self.description = "Copper and iron entities with head and handle stats"

    @property
    def plugin_id(self) -> str:
        return self.name

    def register(self, registry: Any) -> None:
        """
        Register the metals.

        Args:
            registry: Registry owned by the host
        """
        copper = Entity("copper", {"color": "#e77c56"})
        iron = Entity("iron", {"color": "#d8d8d8"})

        registry.add_entity(
            copper,
            StatRecord("head", {"durability": 210, "mining_speed": 5.3, "attack": 3.0, "harvest_level": 1}),
            MALLEABLE
        )
        registry.add_stats(copper, StatRecord("handle", {"durability": 30, "modifier": 1.05}))

        registry.add_entity(
            iron,
            StatRecord("head", {"durability": 204, "mining_speed": 6.0, "attack": 4.0, "harvest_level": 2})
        )
        registry.add_trait(iron, MAGNETIC)

        registry.add_tool(Tool("pickaxe", ("head", "handle", "binding")))
        registry.register_modifier(Modifier("haste", "Increases mining speed"))


PLUGIN = MetalsPlugin()
