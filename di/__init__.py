"""
Dependency injection container and factories for the registry host.
"""

from .container import DIContainer
from .factories import ComponentFactory

__all__ = ['DIContainer', 'ComponentFactory']
