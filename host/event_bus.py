"""
Synchronous event hooks for registration notifications.
"""

import logging
from collections import defaultdict
from dataclasses import replace
from typing import Callable, Dict, List, Optional

from entity_registry.events import EventKind, HookResult, RegistrationEvent
from interfaces import IEventHook

logger = logging.getLogger(__name__)

Listener = Callable[[RegistrationEvent], Optional[HookResult]]


class NullEventHook(IEventHook):
    """Event hook that lets every registration proceed unchanged."""

    def notify(self, kind: EventKind, event: RegistrationEvent) -> HookResult:
        return HookResult.allow()


class EventBus(IEventHook):
    """
    Dispatches registration events to listeners subscribed per event kind.

    Listeners run in subscription order and return a HookResult or None.
    The first veto stops dispatch. For stat events a replacement payload is
    handed to the listeners that follow, and the last replacement wins;
    replacements returned for other kinds are dropped.
    """

    def __init__(self):
        """Initialize an event bus without listeners."""
        self._listeners: Dict[EventKind, List[Listener]] = defaultdict(list)

    def subscribe(self, kind: EventKind, listener: Listener) -> None:
        """
        Subscribe a listener to one event kind.

        Args:
            kind: Event kind to listen for
            listener: Callable receiving the RegistrationEvent
        """
        self._listeners[kind].append(listener)
        logger.debug(f"Subscribed {getattr(listener, '__name__', listener)} to {kind.value}")

    def unsubscribe(self, kind: EventKind, listener: Listener) -> bool:
        """
        Remove a listener.

        Returns:
            True if the listener was subscribed
        """
        listeners = self._listeners.get(kind, [])
        if listener in listeners:
            listeners.remove(listener)
            return True
        return False

    def listener_count(self, kind: Optional[EventKind] = None) -> int:
        if kind is not None:
            return len(self._listeners.get(kind, []))
        return sum(len(listeners) for listeners in self._listeners.values())

    def notify(self, kind: EventKind, event: RegistrationEvent) -> HookResult:
        replacement = None

        for listener in list(self._listeners.get(kind, [])):
            result = listener(event)
            if result is None:
                continue
            if result.vetoed:
                logger.debug(f"{kind.value} for {event.identifier} vetoed: {result.reason}")
                return HookResult.veto(result.reason)
            if result.replacement is not None:
                if kind is not EventKind.STAT_REGISTER:
                    logger.debug(f"Ignoring replacement for {kind.value} on {event.identifier}")
                    continue
                replacement = result.replacement
                event = replace(event, record=replacement)

        if replacement is not None:
            return HookResult.override(replacement)
        return HookResult.allow()
