"""Domain events for the InAppNotification aggregate."""

from protean.fields import DateTime, Identifier, String

from dispatch.domain import dispatch


@dispatch.event(part_of="InAppNotification")
class InAppNotificationCreated:
    """An in-app notification was written to a user's inbox."""

    __version__ = 1

    notification_id: Identifier(required=True)
    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)
    event_kind: String(required=True)
    title: String(required=True)
    created_at: DateTime(required=True)


@dispatch.event(part_of="InAppNotification")
class InAppNotificationRead:
    """A user read an in-app notification."""

    __version__ = 1

    notification_id: Identifier(required=True)
    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)
    read_at: DateTime(required=True)
