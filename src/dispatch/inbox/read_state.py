"""Inbox read-state commands + handler."""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from dispatch.domain import dispatch
from dispatch.inbox.notification import InAppNotification


@dispatch.command(part_of="InAppNotification")
class MarkNotificationRead:
    """Mark one of the user's notifications as read."""

    notification_id: Identifier(required=True)
    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)


@dispatch.command(part_of="InAppNotification")
class MarkAllNotificationsRead:
    """Mark every unread notification of a user as read."""

    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)


@dispatch.command_handler(part_of=InAppNotification)
class ReadStateHandler:
    @handle(MarkNotificationRead)
    def mark_read(self, command: MarkNotificationRead):
        repo = current_domain.repository_for(InAppNotification)
        notification = repo.get(str(command.notification_id))

        # Tenant and owner must match; another user's notification reads as missing
        if str(notification.tenant_id) != str(command.tenant_id) or str(notification.user_id) != str(
            command.user_id
        ):
            raise ObjectNotFoundError(f"InAppNotification {command.notification_id} not found")

        notification.mark_read()
        repo.add(notification)

    @handle(MarkAllNotificationsRead)
    def mark_all_read(self, command: MarkAllNotificationsRead):
        repo = current_domain.repository_for(InAppNotification)
        unread = (
            repo._dao.query.filter(
                tenant_id=str(command.tenant_id),
                user_id=str(command.user_id),
                is_read=False,
            )
            .all()
            .items
        )
        for notification in unread:
            try:
                notification.mark_read()
            except ValidationError:
                continue
            repo.add(notification)
