"""Push delivery handler: fans out to every stored subscription of the user."""

import structlog

from dispatch.channel.push_port import PushPort
from dispatch.event import ActionConfig, ActionResult, DispatchEvent
from dispatch.handlers.base import ActionHandler
from dispatch.ports.directory_port import PushSubscriptionStore
from dispatch.taxonomy import ActionType
from dispatch.templates import render_message

logger = structlog.get_logger(__name__)


class PushActionHandler(ActionHandler):
    action_type = ActionType.PUSH

    def __init__(self, gateway: PushPort, subscriptions: PushSubscriptionStore):
        self._gateway = gateway
        self._subscriptions = subscriptions

    def can_handle(self, event: DispatchEvent) -> bool:
        return bool(event.target_user_id)

    def execute(self, tenant_id: str, event: DispatchEvent, config: ActionConfig) -> ActionResult:
        try:
            subscriptions = self._subscriptions.list_subscriptions(tenant_id, event.target_user_id)
            if not subscriptions:
                return ActionResult.failed(self.action_type, "No push subscriptions for user")

            rendered = render_message(event.kind, event.payload)
            data = {"kind": event.kind.code, "tenant_id": tenant_id}

            message_ids = []
            errors = []
            for subscription in subscriptions:
                try:
                    result = self._gateway.send(subscription, rendered["title"], rendered["body"], data)
                except Exception as exc:
                    errors.append(str(exc))
                    continue
                if result.get("status") == "sent":
                    message_ids.append(result.get("message_id"))
                else:
                    errors.append(result.get("error") or "Push send failed")

            if errors:
                logger.warning(
                    "Some push sends failed",
                    tenant_id=tenant_id,
                    user_id=event.target_user_id,
                    failed=len(errors),
                    sent=len(message_ids),
                )

            if not message_ids:
                return ActionResult.failed(self.action_type, "; ".join(errors))

            return ActionResult(
                success=True,
                action_type=self.action_type,
                metadata={"message_ids": message_ids, "failed": len(errors)},
            )
        except Exception as exc:
            logger.error(
                "Push handler failed",
                tenant_id=tenant_id,
                kind=event.kind.code,
                error=str(exc),
            )
            return ActionResult.failed(self.action_type, str(exc))
