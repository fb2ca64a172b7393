"""Fake push adapter: records sent pushes in memory."""

from uuid import uuid4

from dispatch.channel.push_port import PushPort


class FakePushAdapter(PushPort):
    """Push adapter that records notifications in memory for test assertions.

    Endpoints passed to :meth:`expire` fail like a provider rejecting a stale
    subscription, while the others keep succeeding.
    """

    def __init__(self):
        self.sent_pushes: list[dict] = []
        self.expired_endpoints: set[str] = set()
        self.should_succeed = True
        self.failure_reason = "Push delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Push delivery failed"):
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def expire(self, *endpoints: str):
        self.expired_endpoints.update(endpoints)

    def send(self, subscription: dict, title: str, body: str, data: dict | None = None) -> dict:
        endpoint = subscription.get("endpoint")
        if endpoint in self.expired_endpoints:
            return {"message_id": None, "status": "failed", "error": "Subscription expired"}
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"push-{uuid4().hex[:12]}"
        self.sent_pushes.append(
            {"message_id": message_id, "endpoint": endpoint, "title": title, "body": body, "data": data}
        )
        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        self.sent_pushes.clear()
        self.expired_endpoints.clear()
        self.should_succeed = True
        self.failure_reason = "Push delivery failed"
