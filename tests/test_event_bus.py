"""
Tests for the host-side event hooks and registrant providers.
"""

import pytest
from unittest.mock import Mock

from entity_registry import Entity, EventKind, HookResult, RegistrationEvent, StatRecord
from host import ActivePluginTracker, EventBus, NullEventHook, StaticRegistrantProvider


def stat_event(record=None):
    return RegistrationEvent(EventKind.STAT_REGISTER, Entity("copper"), record or StatRecord("head"))


class TestEventBus:
    """Test listener dispatch."""

    @pytest.fixture
    def bus(self):
        """Create test bus instance."""
        return EventBus()

    def test_no_listeners_allows(self, bus):
        result = bus.notify(EventKind.ENTITY_REGISTER, RegistrationEvent(EventKind.ENTITY_REGISTER, Entity("copper")))

        assert result == HookResult.allow()

    def test_listeners_only_see_their_kind(self, bus):
        """Test listeners are subscribed per event kind."""
        listener = Mock(return_value=None)
        bus.subscribe(EventKind.TRAIT_REGISTER, listener)

        bus.notify(EventKind.STAT_REGISTER, stat_event())

        listener.assert_not_called()
        assert bus.listener_count(EventKind.TRAIT_REGISTER) == 1
        assert bus.listener_count() == 1

    def test_first_veto_stops_dispatch(self, bus):
        """Test later listeners do not run after a veto."""
        later = Mock(return_value=None)
        bus.subscribe(EventKind.STAT_REGISTER, lambda event: HookResult.veto("no stats"))
        bus.subscribe(EventKind.STAT_REGISTER, later)

        result = bus.notify(EventKind.STAT_REGISTER, stat_event())

        assert result.vetoed
        assert result.reason == "no stats"
        later.assert_not_called()

    def test_replacement_chains_to_next_listener(self, bus):
        """Test a replacement is visible to the listeners that follow."""
        first = StatRecord("head", {"durability": 1})
        second = StatRecord("head", {"durability": 2})
        seen = []

        def double(event):
            seen.append(event.record)
            return HookResult.override(second)

        bus.subscribe(EventKind.STAT_REGISTER, lambda event: HookResult.override(first))
        bus.subscribe(EventKind.STAT_REGISTER, double)

        result = bus.notify(EventKind.STAT_REGISTER, stat_event())

        assert seen == [first]
        assert result.replacement is second
        assert not result.vetoed

    def test_unsubscribe(self, bus):
        listener = Mock(return_value=HookResult.veto())
        bus.subscribe(EventKind.STAT_REGISTER, listener)

        assert bus.unsubscribe(EventKind.STAT_REGISTER, listener) is True
        assert bus.unsubscribe(EventKind.STAT_REGISTER, listener) is False
        assert not bus.notify(EventKind.STAT_REGISTER, stat_event()).vetoed

    def test_listener_errors_propagate(self, bus):
        """Test a failing listener is not swallowed."""
        bus.subscribe(EventKind.STAT_REGISTER, Mock(side_effect=RuntimeError("boom")))

        with pytest.raises(RuntimeError, match="boom"):
            bus.notify(EventKind.STAT_REGISTER, stat_event())

    def test_null_hook_allows(self):
        assert NullEventHook().notify(EventKind.STAT_REGISTER, stat_event()) == HookResult.allow()


class TestRegistrantProviders:
    """Test registrant identity providers."""

    def test_tracker_reports_host_when_idle(self):
        tracker = ActivePluginTracker("host")

        assert tracker.active_plugin is None
        assert tracker.current_registrant() == "host"

    def test_tracker_activation_nests(self):
        """Test activation is scoped and restores the outer plugin."""
        tracker = ActivePluginTracker("host")

        with tracker.activate("alpha"):
            assert tracker.current_registrant() == "alpha"
            with tracker.activate("beta"):
                assert tracker.current_registrant() == "beta"
            assert tracker.current_registrant() == "alpha"

        assert tracker.current_registrant() == "host"

    def test_tracker_restores_after_error(self):
        tracker = ActivePluginTracker("host")

        with pytest.raises(ValueError):
            with tracker.activate("alpha"):
                raise ValueError("failed")

        assert tracker.active_plugin is None

    def test_static_provider(self):
        assert StaticRegistrantProvider("alpha").current_registrant() == "alpha"


class TestReplacementScope:
    """Test replacements are only honoured for stat events."""

    @pytest.mark.parametrize("kind", [EventKind.ENTITY_REGISTER, EventKind.TRAIT_REGISTER])
    def test_replacement_dropped_for_other_kinds(self, kind):
        bus = EventBus()
        later = Mock(return_value=None)
        bus.subscribe(kind, lambda event: HookResult.override(Entity("iron")))
        bus.subscribe(kind, later)
        event = RegistrationEvent(kind, Entity("copper"))

        result = bus.notify(kind, event)

        assert result == HookResult.allow()
        later.assert_called_once_with(event)

    def test_interface_annotations_resolve(self):
        """Test the hook interface is typed with the registry's event types."""
        import typing
        from entity_registry import events
        from interfaces import IEventHook

        hints = typing.get_type_hints(IEventHook.notify, localns=vars(events))

        assert hints == {
            "kind": EventKind,
            "event": RegistrationEvent,
            "return": HookResult,
        }
