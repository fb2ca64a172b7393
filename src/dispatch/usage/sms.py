"""Tenant SMS service: sends through the SMS gateway and tracks usage.

Successful sends are counted under the kind's category; one-time codes are
counted under the Authentication category's OTP sub-counter. Failed sends
are logged and not counted.
"""

from typing import Optional

import structlog

from dispatch.channel.sms_port import SMSPort
from dispatch.taxonomy import ActionCategory, category_for_sms
from dispatch.usage.ledger import UsageLedger

logger = structlog.get_logger(__name__)


class TenantSmsService:
    def __init__(self, gateway: SMSPort, ledger: UsageLedger):
        self._gateway = gateway
        self._ledger = ledger

    def send_sms(self, tenant_id: str, phone_number: str, body: str, kind) -> dict:
        result = self._gateway.send(to=phone_number, body=body)

        if result.get("status") == "sent":
            self._ledger.track(
                tenant_id,
                kind,
                category_for_sms(kind),
                {"phone_number": phone_number, "message_id": result.get("message_id")},
            )
        else:
            logger.warning(
                "SMS send failed",
                tenant_id=tenant_id,
                kind=getattr(kind, "value", kind),
                error=result.get("error"),
            )

        return result

    def send_otp_sms(self, phone_number: str, body: str, tenant_id: Optional[str] = None) -> dict:
        """Send a one-time code; tracked only when the tenant is known."""
        result = self._gateway.send(to=phone_number, body=body, is_otp=True)

        if tenant_id and result.get("status") == "sent":
            self._ledger.track(
                tenant_id,
                None,
                ActionCategory.AUTHENTICATION,
                {"phone_number": phone_number, "message_id": result.get("message_id"), "is_otp": True},
            )
        elif not tenant_id:
            logger.debug("Sending OTP SMS without tenant tracking")

        return result
