"""Fake SMS adapter: records sent messages in memory."""

from uuid import uuid4

from dispatch.channel.sms_port import SMSPort


class FakeSMSAdapter(SMSPort):
    """SMS adapter that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_messages: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "SMS delivery failed"
        self.raise_error: Exception | None = None

    def configure(self, should_succeed: bool = True, failure_reason: str = "SMS delivery failed", raise_error=None):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.raise_error = raise_error

    def send(self, to: str, body: str, is_otp: bool = False) -> dict:
        if self.raise_error is not None:
            raise self.raise_error

        if not self.should_succeed:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }

        message_id = f"sms-{uuid4().hex[:12]}"
        self.sent_messages.append(
            {
                "message_id": message_id,
                "to": to,
                "body": body,
                "is_otp": is_otp,
            }
        )

        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear sent messages (useful between tests)."""
        self.sent_messages.clear()
        self.should_succeed = True
        self.failure_reason = "SMS delivery failed"
        self.raise_error = None
