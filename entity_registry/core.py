"""
Conflict-safe registry for entities contributed by independent plugins.

Entities are registered once, sub-records (stat blocks and traits) are attached
to them, and every successful commit records which plugin made it so conflicts
can be diagnosed. An injected event hook can veto or adjust a registration
before it commits.

The registry is not thread-safe: the host populates it during a single
sequential load phase and only then hands it to concurrent readers.
"""

import logging
from typing import Any, Dict, Optional, Set, Tuple, Type, Union

from config.settings import settings
from interfaces import IEventHook, IRegistrantProvider
from .errors import (
    DuplicateError, RegistryError, SchemaError, UnknownEntityError, ValidationError
)
from .events import EventKind, HookResult, RegistrationEvent
from .models import UNKNOWN, Modifier, StatRecord, Tool, Trait
from .provenance import STATS, TRAITS, ProvenanceLedger
from .validation import identifier_problem

logger = logging.getLogger(__name__)

ENTITY_KIND = "entity"
TRAIT_KIND = "trait"

EntityRef = Union[str, Any]


class Registry:
    """Registration tables for entities, sub-records, tools and modifiers."""

    def __init__(self, registrant_provider: IRegistrantProvider,
                 event_hook: Optional[IEventHook] = None,
                 fallback: Any = UNKNOWN):
        """
        Initialize an empty registry.

        Args:
            registrant_provider: Reports the plugin currently registering
            event_hook: Notified before entity, stat and trait commits; None disables notifications
            fallback: Sentinel returned for unknown identifiers, holder of the default stats
        """
        self.registrant_provider = registrant_provider
        self.event_hook = event_hook
        self.fallback = fallback

        self._entities: Dict[str, Any] = {}
        self._stats: Dict[str, Dict[str, StatRecord]] = {}
        self._attached_traits: Dict[str, Dict[str, Trait]] = {}
        self._traits: Dict[str, Trait] = {}
        self._tools: Dict[Tool, None] = {}
        self._modifiers: Dict[str, Modifier] = {}
        # Vetoed identifiers; calls regarding them are eaten silently
        self._cancelled: Set[str] = set()
        self.provenance = ProvenanceLedger(settings.UNKNOWN_REGISTRANT)

    # --- entities ---

    def add_entity(self, entity: Any, stats: Optional[StatRecord] = None,
                   trait: Optional[Trait] = None) -> None:
        """
        Register an entity, optionally attaching stats and a trait.

        The identifier has to be lowercase, must not contain whitespace and
        has to be globally unique. A vetoed registration is not an error; the
        identifier is marked cancelled and the optional attachments no-op.

        Args:
            entity: Record exposing an ``identifier``
            stats: Stat block attached after registration
            trait: Trait attached after registration

        Raises:
            ValidationError: Malformed identifier
            DuplicateError: Identifier already registered
        """
        self._register_entity(entity)

        if stats is not None:
            self.add_stats(entity.identifier, stats)
        if trait is not None:
            self.add_trait(entity.identifier, trait)

    def _register_entity(self, entity: Any) -> None:
        if entity is None:
            self._error(ValidationError, "Could not register entity: entity is None")

        identifier = getattr(entity, "identifier", None)
        problem = identifier_problem(identifier)
        if problem:
            self._error(ValidationError, f"Could not register entity \"{identifier}\": {problem}")

        if identifier == self.fallback.identifier:
            self._error(ValidationError,
                        f"Could not register entity \"{identifier}\": "
                        f"Identifier is reserved for the fallback entity.")

        if identifier in self._entities:
            registered_by = self.provenance.entity_registrant(ENTITY_KIND, identifier)
            self._error(DuplicateError,
                        f"Could not register entity \"{identifier}\": "
                        f"It was already registered by {registered_by}",
                        registrant=registered_by)

        # a cancelled identifier stays dead
        if identifier in self._cancelled:
            logger.debug(f"Addition of entity {identifier} skipped: previously cancelled")
            return

        result = self._notify(EventKind.ENTITY_REGISTER, RegistrationEvent(EventKind.ENTITY_REGISTER, entity))
        if result.vetoed:
            logger.debug(f"Addition of entity {identifier} cancelled by event hook {result.reason}".rstrip())
            self._cancelled.add(identifier)
            return

        self._entities[identifier] = entity
        registrant = self._current_registrant()
        self.provenance.record_entity(ENTITY_KIND, identifier, registrant)
        logger.debug(f"Registered entity {identifier} for {registrant}")

    def get_entity(self, identifier: str) -> Any:
        """
        Look up an entity.

        Args:
            identifier: Entity identifier

        Returns:
            The registered entity, or the fallback sentinel if unknown
        """
        return self._entities.get(identifier, self.fallback)

    def has_entity(self, identifier: str) -> bool:
        return identifier in self._entities

    def list_entities(self) -> Tuple[Any, ...]:
        """All registered entities in registration order."""
        return tuple(self._entities.values())

    def is_cancelled(self, identifier: str) -> bool:
        return identifier in self._cancelled

    # --- stats ---

    def add_default_stats(self, stats: StatRecord) -> None:
        """
        Attach a default stat block to the fallback entity.

        Stats of a kind can only be attached to entities after the fallback
        entity holds a default for that kind.

        Raises:
            ValidationError: Malformed stat kind
            DuplicateError: Default for this kind already present
        """
        identifier = self.fallback.identifier
        self._check_record(stats, "Stats", identifier)
        attached = self._stats.setdefault(identifier, {})
        if stats.identifier in attached:
            registered_by = self.provenance.sub_record_registrant(STATS, identifier, stats.identifier)
            self._error(DuplicateError,
                        f"Could not add default Stats: Stats of type \"{stats.identifier}\" "
                        f"were already registered by {registered_by}",
                        registrant=registered_by)

        attached[stats.identifier] = stats
        self.provenance.record_sub_record(STATS, identifier, stats.identifier, self._current_registrant())
        logger.debug(f"Registered default stats {stats.identifier}")

    def add_stats(self, entity: EntityRef, stats: StatRecord) -> None:
        """
        Attach a stat block to a registered entity.

        Args:
            entity: Entity or its identifier
            stats: Stat block; its identifier is the stat kind

        Raises:
            UnknownEntityError: Entity is None or was never registered
            DuplicateError: Stats of this kind already attached
            SchemaError: Fallback entity has no default stats of this kind
        """
        identifier = self._resolve_target(entity, stats, "Stats")
        if identifier is None:
            return
        self._check_record(stats, "Stats", identifier)

        attached = self._stats.setdefault(identifier, {})
        if stats.identifier in attached:
            registered_by = self.provenance.sub_record_registrant(STATS, identifier, stats.identifier)
            self._error(DuplicateError,
                        f"Could not add Stats to \"{identifier}\": Stats of type \"{stats.identifier}\" "
                        f"were already registered by {registered_by}",
                        registrant=registered_by)

        if self.get_stats(self.fallback.identifier, stats.identifier) is None:
            self._error(SchemaError,
                        f"Could not add Stats of type \"{stats.identifier}\": Default entity does not "
                        f"have default stats for said type. Please add default-values to the default "
                        f"entity \"{self.fallback.identifier}\" first.")

        target = self._entities[identifier]
        result = self._notify(EventKind.STAT_REGISTER, RegistrationEvent(EventKind.STAT_REGISTER, target, stats))
        if result.vetoed:
            logger.debug(f"Stats {stats.identifier} on {identifier} cancelled by event hook")
            return

        # overridden stats from the hook
        if result.replacement is not None:
            replacement = result.replacement
            if getattr(replacement, "identifier", None) != stats.identifier:
                self._error(ValidationError,
                            f"Could not add Stats to \"{identifier}\": replacement for "
                            f"\"{stats.identifier}\" changes the stat type")
            logger.debug(f"Stats {stats.identifier} on {identifier} replaced by event hook")
            stats = replacement

        attached[stats.identifier] = stats
        self.provenance.record_sub_record(STATS, identifier, stats.identifier, self._current_registrant())

    def get_stats(self, entity: EntityRef, stat_kind: str) -> Optional[StatRecord]:
        """
        Get the stats of one kind attached to an entity.

        Returns:
            The stat block or None
        """
        return self._stats.get(self._identifier_of(entity), {}).get(stat_kind)

    def get_all_stats(self, entity: EntityRef) -> Dict[str, StatRecord]:
        return dict(self._stats.get(self._identifier_of(entity), {}))

    # --- traits ---

    def register_trait(self, trait: Trait) -> None:
        """
        Register a trait definition globally.

        Entities and modifiers share traits, so an already known identifier
        is skipped without error.
        """
        self._check_record(trait, "Trait", None)
        if trait.identifier in self._traits:
            return

        self._traits[trait.identifier] = trait
        self.provenance.record_entity(TRAIT_KIND, trait.identifier, self._current_registrant())
        logger.debug(f"Registered trait {trait.identifier}")

    def add_trait(self, entity: EntityRef, trait: Trait) -> None:
        """
        Attach a trait to a registered entity, registering its definition if new.

        Args:
            entity: Entity or its identifier
            trait: Trait to attach

        Raises:
            UnknownEntityError: Entity is None or was never registered
            DuplicateError: Trait already attached to this entity
        """
        identifier = self._resolve_target(entity, trait, "Trait")
        if identifier is None:
            return
        self._check_record(trait, "Trait", identifier)

        attached = self._attached_traits.setdefault(identifier, {})
        if trait.identifier in attached:
            registered_by = self.provenance.sub_record_registrant(TRAITS, identifier, trait.identifier)
            self._error(DuplicateError,
                        f"Could not add Trait to \"{identifier}\": Trait \"{trait.identifier}\" "
                        f"was already registered by {registered_by}",
                        registrant=registered_by)

        target = self._entities[identifier]
        result = self._notify(EventKind.TRAIT_REGISTER, RegistrationEvent(EventKind.TRAIT_REGISTER, target, trait))
        if result.vetoed:
            logger.debug(f"Trait {trait.identifier} on {identifier} cancelled by event hook")
            return

        self.register_trait(trait)
        attached[trait.identifier] = trait
        self.provenance.record_sub_record(TRAITS, identifier, trait.identifier, self._current_registrant())

    def get_trait(self, identifier: str) -> Optional[Trait]:
        return self._traits.get(identifier)

    def list_traits(self) -> Tuple[Trait, ...]:
        return tuple(self._traits.values())

    def has_trait(self, entity: EntityRef, trait_identifier: str) -> bool:
        return trait_identifier in self._attached_traits.get(self._identifier_of(entity), {})

    def get_traits(self, entity: EntityRef) -> Tuple[Trait, ...]:
        """Traits attached to an entity, in attachment order."""
        return tuple(self._attached_traits.get(self._identifier_of(entity), {}).values())

    # --- tools & modifiers ---

    def add_tool(self, tool: Tool) -> None:
        """Add a tool; adding a known tool again changes nothing."""
        self._tools[tool] = None

    def list_tools(self) -> Tuple[Tool, ...]:
        return tuple(self._tools)

    def register_modifier(self, modifier: Modifier) -> None:
        """Register a modifier, replacing any modifier with the same identifier."""
        if modifier.identifier in self._modifiers:
            logger.debug(f"Modifier {modifier.identifier} replaced")
        self._modifiers[modifier.identifier] = modifier

    def get_modifier(self, identifier: str) -> Optional[Modifier]:
        return self._modifiers.get(identifier)

    def list_modifiers(self) -> Tuple[Modifier, ...]:
        return tuple(self._modifiers.values())

    # --- provenance & diagnostics ---

    def get_registrant(self, entity: EntityRef) -> str:
        """
        Get the registrant that registered an entity.

        Returns:
            Registrant id, or the unknown-registrant sentinel
        """
        return self.provenance.entity_registrant(ENTITY_KIND, self._identifier_of(entity))

    def summary(self) -> Dict[str, int]:
        """
        Get registry content statistics.

        Returns:
            Dictionary with table sizes
        """
        return {
            "entities": len(self._entities),
            "cancelled": len(self._cancelled),
            "default_stats": len(self._stats.get(self.fallback.identifier, {})),
            "traits": len(self._traits),
            "tools": len(self._tools),
            "modifiers": len(self._modifiers),
        }

    # --- internals ---

    def _identifier_of(self, entity: EntityRef) -> Optional[str]:
        if entity is None or isinstance(entity, str):
            return entity
        return getattr(entity, "identifier", None)

    def _resolve_target(self, entity: EntityRef, record: Any, label: str) -> Optional[str]:
        """Identifier of an attachment target, or None if it was cancelled."""
        record_id = getattr(record, "identifier", None)
        if entity is None:
            self._error(UnknownEntityError, f"Could not add {label} \"{record_id}\": Entity is None")

        identifier = self._identifier_of(entity)
        if not isinstance(identifier, str):
            self._error(UnknownEntityError,
                        f"Could not add {label} \"{record_id}\": {entity!r} is not an entity")
        if identifier in self._cancelled:
            return None
        if identifier not in self._entities:
            self._error(UnknownEntityError,
                        f"Could not add {label} \"{record_id}\" to \"{identifier}\": Unknown entity")
        return identifier

    def _check_record(self, record: Any, label: str, identifier: Optional[str]) -> None:
        record_id = getattr(record, "identifier", None)
        if not isinstance(record_id, str) or not record_id:
            target = f" to \"{identifier}\"" if identifier else ""
            self._error(ValidationError, f"Could not add {label}{target}: {label} identifier must be a non-empty string.")

    def _notify(self, kind: EventKind, event: RegistrationEvent) -> HookResult:
        if self.event_hook is None:
            return HookResult.allow()
        return self.event_hook.notify(kind, event) or HookResult.allow()

    def _current_registrant(self) -> str:
        return self.registrant_provider.current_registrant()

    def _error(self, error_class: Type[RegistryError], message: str, **kwargs: Any) -> None:
        logger.error(message)
        raise error_class(message, **kwargs)
