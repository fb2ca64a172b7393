"""Tests for the EventPreference aggregate."""

import json

import pytest
from protean.exceptions import ValidationError

from dispatch.preference.preference import EventPreference
from dispatch.taxonomy import EventKind


def _make_preference(**overrides):
    defaults = {"tenant_id": "tenant-1", "user_id": "user-1"}
    defaults.update(overrides)
    return EventPreference.create_default(**defaults)


# ---------------------------------------------------------------
# Factory
# ---------------------------------------------------------------
class TestPreferenceCreation:
    def test_create_default_sets_ids(self):
        pref = _make_preference(user_id="user-42")
        assert pref.id is not None
        assert str(pref.user_id) == "user-42"
        assert str(pref.tenant_id) == "tenant-1"

    def test_create_default_stores_no_choices(self):
        pref = _make_preference()
        assert json.loads(pref.preferences) == {}

    def test_create_default_raises_preferences_created_event(self):
        pref = _make_preference()
        assert len(pref._events) == 1
        event = pref._events[0]
        assert event.__class__.__name__ == "PreferencesCreated"
        assert str(event.preference_id) == str(pref.id)


# ---------------------------------------------------------------
# Choices
# ---------------------------------------------------------------
class TestSetPreference:
    def test_opt_out(self):
        pref = _make_preference()
        pref.set_preference(EventKind.ORDER_FULFILLED, False)
        assert pref.is_enabled(EventKind.ORDER_FULFILLED) is False

    def test_accepts_code(self):
        pref = _make_preference()
        pref.set_preference("order.cancelled", False)
        assert pref.is_enabled(EventKind.ORDER_CANCELLED) is False

    def test_raises_changed_event(self):
        pref = _make_preference()
        pref._events.clear()
        pref.set_preference(EventKind.CUSTOMER_CREATED, False)
        event = pref._events[0]
        assert event.__class__.__name__ == "EventPreferenceChanged"
        assert event.event_kind == "customer.created"
        assert event.enabled is False

    def test_rejects_system_event(self):
        pref = _make_preference()
        with pytest.raises(ValidationError) as exc:
            pref.set_preference(EventKind.ML_TRAINING_STARTED, False)
        assert "not subscribable" in str(exc.value)

    def test_rejects_unknown_kind(self):
        pref = _make_preference()
        with pytest.raises(ValidationError):
            pref.set_preference("order.teleported", True)


class TestEffectiveFlags:
    def test_missing_entry_uses_default(self):
        pref = _make_preference()
        assert pref.is_enabled(EventKind.ORDER_PAYMENT_SETTLED) is True

    def test_as_map_covers_subscribable_kinds_only(self):
        pref = _make_preference()
        flags = pref.as_map()
        assert EventKind.ORDER_PAYMENT_SETTLED in flags
        assert EventKind.TENANT_APPROVED not in flags

    def test_as_map_reflects_choice(self):
        pref = _make_preference()
        pref.set_preference(EventKind.ORDER_PAYMENT_SETTLED, False)
        assert pref.as_map()[EventKind.ORDER_PAYMENT_SETTLED] is False
        assert pref.as_map()[EventKind.ORDER_FULFILLED] is True
