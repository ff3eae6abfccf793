"""
Traceability information: who registered what. Used to diagnose conflicts.
"""

import logging
from typing import Dict, Optional, Tuple

from config.settings import settings

logger = logging.getLogger(__name__)

# Sub-record tables tracked by the ledger
STATS = "stats"
TRAITS = "traits"


class ProvenanceLedger:
    """Write-once mapping from registered keys to registrant ids."""

    def __init__(self, unknown_registrant: Optional[str] = None):
        """
        Initialize an empty ledger.

        Args:
            unknown_registrant: Value reported for keys that were never recorded
        """
        self.unknown_registrant = unknown_registrant or settings.UNKNOWN_REGISTRANT
        self._entities: Dict[Tuple[str, str], str] = {}
        self._sub_records: Dict[Tuple[str, str, str], str] = {}

    def record_entity(self, kind: str, identifier: str, registrant: str) -> bool:
        """
        Record the registrant of an entity.

        Args:
            kind: Entity kind (e.g. "entity", "trait")
            identifier: Entity identifier
            registrant: Registrant id

        Returns:
            True if recorded, False if a record already existed
        """
        key = (kind, identifier)
        if key in self._entities:
            logger.warning(
                f"Provenance for {kind} '{identifier}' already recorded as "
                f"{self._entities[key]}; ignoring {registrant}"
            )
            return False
        self._entities[key] = registrant
        return True

    def record_sub_record(self, table: str, entity_identifier: str,
                          sub_identifier: str, registrant: str) -> bool:
        """
        Record the registrant of a sub-record attached to an entity.

        Args:
            table: Sub-record table (STATS or TRAITS)
            entity_identifier: Owning entity identifier
            sub_identifier: Sub-record identifier
            registrant: Registrant id

        Returns:
            True if recorded, False if a record already existed
        """
        key = (table, entity_identifier, sub_identifier)
        if key in self._sub_records:
            logger.warning(
                f"Provenance for {table} '{sub_identifier}' on '{entity_identifier}' "
                f"already recorded as {self._sub_records[key]}; ignoring {registrant}"
            )
            return False
        self._sub_records[key] = registrant
        return True

    def entity_registrant(self, kind: str, identifier: str) -> str:
        return self._entities.get((kind, identifier), self.unknown_registrant)

    def sub_record_registrant(self, table: str, entity_identifier: str, sub_identifier: str) -> str:
        return self._sub_records.get((table, entity_identifier, sub_identifier), self.unknown_registrant)

    def __len__(self) -> int:
        return len(self._entities) + len(self._sub_records)
