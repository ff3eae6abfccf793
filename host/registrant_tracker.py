"""
Registrant identity providers.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

from config.settings import settings
from interfaces import IRegistrantProvider


class ActivePluginTracker(IRegistrantProvider):
    """Tracks the plugin whose registration routine is currently running."""

    def __init__(self, host_registrant: Optional[str] = None):
        """
        Initialize the tracker.

        Args:
            host_registrant: Reported while no plugin is active
        """
        self.host_registrant = host_registrant or settings.HOST_REGISTRANT
        self._active: List[str] = []

    @contextmanager
    def activate(self, plugin_id: str) -> Iterator[str]:
        """Mark a plugin as active for the duration of the block."""
        self._active.append(plugin_id)
        try:
            yield plugin_id
        finally:
            self._active.pop()

    @property
    def active_plugin(self) -> Optional[str]:
        return self._active[-1] if self._active else None

    def current_registrant(self) -> str:
        return self.active_plugin or self.host_registrant


class StaticRegistrantProvider(IRegistrantProvider):
    """Reports the same registrant for every call."""

    def __init__(self, registrant: str):
        self.registrant = registrant

    def current_registrant(self) -> str:
        return self.registrant
