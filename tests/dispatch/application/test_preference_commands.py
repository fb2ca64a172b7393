"""Application tests for the preference command handler and store."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from dispatch.preference.management import SetEventPreference
from dispatch.preference.preference import EventPreference
from dispatch.preference.store import RepositoryPreferenceStore, default_preferences
from dispatch.taxonomy import EventKind


def _set(user_id="user-1", event_kind="order.fulfilled", enabled=False, tenant_id="tenant-1"):
    current_domain.process(
        SetEventPreference(tenant_id=tenant_id, user_id=user_id, event_kind=event_kind, enabled=enabled),
        asynchronous=False,
    )


def _records(user_id="user-1", tenant_id="tenant-1"):
    repo = current_domain.repository_for(EventPreference)
    return repo._dao.query.filter(tenant_id=tenant_id, user_id=user_id).all().items


class TestSetEventPreferenceCommand:
    def test_creates_record_on_first_choice(self):
        _set()
        prefs = _records()
        assert len(prefs) == 1
        assert prefs[0].is_enabled(EventKind.ORDER_FULFILLED) is False

    def test_updates_existing_record(self):
        _set(enabled=False)
        _set(enabled=True)
        _set(event_kind="order.cancelled", enabled=False)

        prefs = _records()
        assert len(prefs) == 1
        assert prefs[0].is_enabled(EventKind.ORDER_FULFILLED) is True
        assert prefs[0].is_enabled(EventKind.ORDER_CANCELLED) is False

    def test_rejects_system_event(self):
        with pytest.raises(ValidationError):
            _set(event_kind="ml.training_started")


class TestRepositoryPreferenceStore:
    def test_defaults_without_record(self):
        assert RepositoryPreferenceStore().get_preferences("tenant-1", "user-1") == default_preferences()

    def test_defaults_are_enabled_for_subscribable_kinds(self):
        assert default_preferences()[EventKind.ORDER_PAYMENT_SETTLED] is True

    def test_reflects_stored_choice(self):
        _set(enabled=False)
        flags = RepositoryPreferenceStore().get_preferences("tenant-1", "user-1")
        assert flags[EventKind.ORDER_FULFILLED] is False
        assert flags[EventKind.ORDER_CANCELLED] is True

    def test_scoped_by_tenant(self):
        _set(enabled=False, tenant_id="tenant-2")
        flags = RepositoryPreferenceStore().get_preferences("tenant-1", "user-1")
        assert flags[EventKind.ORDER_FULFILLED] is True
