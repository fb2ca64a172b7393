"""SMS delivery handler."""

import structlog

from dispatch.event import ActionConfig, ActionResult, DispatchEvent
from dispatch.exceptions import DeliveryFailure
from dispatch.handlers.base import ActionHandler
from dispatch.targets.resolver import TargetResolver
from dispatch.taxonomy import ActionType
from dispatch.templates import render_message
from dispatch.usage.ledger import UsageLedger
from dispatch.usage.sms import TenantSmsService

logger = structlog.get_logger(__name__)

RATE_LIMIT_EXCEEDED = "rate limit exceeded"


class SMSActionHandler(ActionHandler):
    action_type = ActionType.SMS

    def __init__(self, resolver: TargetResolver, sms_service: TenantSmsService, ledger: UsageLedger):
        self._resolver = resolver
        self._sms = sms_service
        self._ledger = ledger

    def can_handle(self, event: DispatchEvent) -> bool:
        return self._resolver.can_resolve_event(event)

    def execute(self, tenant_id: str, event: DispatchEvent, config: ActionConfig) -> ActionResult:
        try:
            phone_number = self._resolver.resolve_for_event(event)

            if self._ledger.check_limit(tenant_id, event.kind, config.limit):
                logger.warning(
                    "SMS limit reached, not sending",
                    tenant_id=tenant_id,
                    kind=event.kind.code,
                    limit=config.limit,
                )
                return ActionResult.failed(self.action_type, RATE_LIMIT_EXCEEDED)

            body = render_message(event.kind, event.payload)["body"]
            result = self._sms.send_sms(tenant_id, phone_number, body, event.kind)

            if result.get("status") != "sent":
                raise DeliveryFailure(result.get("error") or "SMS send failed")

            return ActionResult(
                success=True,
                action_type=self.action_type,
                metadata={"message_id": result.get("message_id"), "phone_number": phone_number},
            )
        except Exception as exc:
            logger.error(
                "SMS handler failed",
                tenant_id=tenant_id,
                kind=event.kind.code,
                error=str(exc),
            )
            return ActionResult.failed(self.action_type, str(exc))
