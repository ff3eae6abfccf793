"""
Error kinds raised by the registry.

Every error carries an ErrorKind so a load-phase driver can record what went
wrong for a plugin without matching on exception classes.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Distinguishable registry failure kinds."""
    VALIDATION = "validation"
    DUPLICATE = "duplicate"
    UNKNOWN_ENTITY = "unknown_entity"
    SCHEMA = "schema"


class RegistryError(Exception):
    """Base class for all registration failures."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RegistryError):
    """Malformed identifier or payload."""
    kind = ErrorKind.VALIDATION


class DuplicateError(RegistryError):
    """Identifier or sub-record already claimed by another registrant."""
    kind = ErrorKind.DUPLICATE

    def __init__(self, message: str, registrant: Optional[str] = None):
        super().__init__(message)
        self.registrant = registrant


class UnknownEntityError(RegistryError):
    """Attachment targets an entity that was never registered."""
    kind = ErrorKind.UNKNOWN_ENTITY


class SchemaError(RegistryError):
    """The fallback entity lacks a default for a sub-record kind."""
    kind = ErrorKind.SCHEMA
