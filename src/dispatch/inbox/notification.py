"""InAppNotification aggregate: one entry in a user's notification inbox.

Written by the in-app delivery handler; read state is changed through the
commands in :mod:`dispatch.inbox.read_state`.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String, Text

from dispatch.domain import dispatch
from dispatch.inbox.events import InAppNotificationCreated, InAppNotificationRead


@dispatch.aggregate
class InAppNotification:
    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)

    event_kind: String(max_length=100, required=True)
    title: String(max_length=200, required=True)
    message: Text(required=True)
    data: Text()  # JSON, the event payload the message was rendered from

    is_read: Boolean(default=False)
    read_at: DateTime()
    created_at: DateTime()

    @classmethod
    def create(cls, tenant_id, user_id, event_kind, title, message, data=None):
        now = datetime.now(UTC)

        notification = cls(
            tenant_id=tenant_id,
            user_id=user_id,
            event_kind=event_kind,
            title=title,
            message=message,
            data=json.dumps(data or {}, default=str),
            is_read=False,
            created_at=now,
        )

        notification.raise_(
            InAppNotificationCreated(
                notification_id=str(notification.id),
                tenant_id=str(tenant_id),
                user_id=str(user_id),
                event_kind=event_kind,
                title=title,
                created_at=now,
            )
        )

        return notification

    def mark_read(self, read_at=None):
        """Mark the notification read. Reading twice is an error."""
        if self.is_read:
            raise ValidationError({"is_read": ["Notification is already read"]})

        now = read_at or datetime.now(UTC)
        self.is_read = True
        self.read_at = now

        self.raise_(
            InAppNotificationRead(
                notification_id=str(self.id),
                tenant_id=str(self.tenant_id),
                user_id=str(self.user_id),
                read_at=now,
            )
        )

    def get_data(self) -> dict:
        return json.loads(self.data) if self.data else {}
