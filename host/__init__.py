"""
Host-side implementations of the registry's collaborator interfaces.
"""

from .event_bus import EventBus, NullEventHook
from .registrant_tracker import ActivePluginTracker, StaticRegistrantProvider

__all__ = ['EventBus', 'NullEventHook', 'ActivePluginTracker', 'StaticRegistrantProvider']
