"""
Provenance-tracked entity registry with cancellable registration events.
"""

from .core import Registry
from .errors import (
    ErrorKind, RegistryError, ValidationError, DuplicateError,
    UnknownEntityError, SchemaError
)
from .events import EventKind, HookResult, RegistrationEvent
from .models import UNKNOWN, Entity, StatRecord, Trait, Tool, Modifier

__all__ = [
    'Registry',
    'ErrorKind',
    'RegistryError',
    'ValidationError',
    'DuplicateError',
    'UnknownEntityError',
    'SchemaError',
    'EventKind',
    'HookResult',
    'RegistrationEvent',
    'UNKNOWN',
    'Entity',
    'StatRecord',
    'Trait',
    'Tool',
    'Modifier'
]
