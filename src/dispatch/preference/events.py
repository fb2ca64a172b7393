"""Domain events for the EventPreference aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from dispatch.domain import dispatch


@dispatch.event(part_of="EventPreference")
class PreferencesCreated:
    """Default event preferences were created for a tenant user."""

    __version__ = 1

    preference_id: Identifier(required=True)
    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)
    created_at: DateTime(required=True)


@dispatch.event(part_of="EventPreference")
class EventPreferenceChanged:
    """A user opted in to or out of one event kind."""

    __version__ = 1

    preference_id: Identifier(required=True)
    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)
    event_kind: String(required=True)
    enabled: Boolean(required=True)
    updated_at: DateTime(required=True)
