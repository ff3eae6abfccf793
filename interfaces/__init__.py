"""
Abstract interfaces for the registry's external collaborators.
Provides contracts for dependency injection and the plugin system.
"""

from .iregistrant_provider import IRegistrantProvider
from .ievent_hook import IEventHook
from .iregistry_plugin import IRegistryPlugin

__all__ = [
    'IRegistrantProvider',
    'IEventHook',
    'IRegistryPlugin'
]
