"""In-app delivery handler: writes to the user's notification inbox."""

import structlog
from protean.utils.globals import current_domain

from dispatch.event import ActionConfig, ActionResult, DispatchEvent
from dispatch.handlers.base import ActionHandler
from dispatch.inbox.notification import InAppNotification
from dispatch.taxonomy import ActionType
from dispatch.templates import render_message

logger = structlog.get_logger(__name__)


class InAppActionHandler(ActionHandler):
    action_type = ActionType.IN_APP

    def can_handle(self, event: DispatchEvent) -> bool:
        return True

    def execute(self, tenant_id: str, event: DispatchEvent, config: ActionConfig) -> ActionResult:
        if not event.target_user_id:
            return ActionResult.failed(self.action_type, "No target user for in-app notification")

        try:
            rendered = render_message(event.kind, event.payload)
            notification = InAppNotification.create(
                tenant_id=tenant_id,
                user_id=event.target_user_id,
                event_kind=event.kind.code,
                title=rendered["title"],
                message=rendered["body"],
                data=event.payload,
            )
            current_domain.repository_for(InAppNotification).add(notification)

            return ActionResult(
                success=True,
                action_type=self.action_type,
                metadata={"notification_id": str(notification.id)},
            )
        except Exception as exc:
            logger.error(
                "In-app handler failed",
                tenant_id=tenant_id,
                kind=event.kind.code,
                error=str(exc),
            )
            return ActionResult.failed(self.action_type, str(exc))
