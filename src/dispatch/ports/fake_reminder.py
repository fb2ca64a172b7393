"""In-memory reminder tracker with a fixed cooldown window."""

from datetime import UTC, datetime, timedelta

from dispatch.exceptions import SideEffectFailure
from dispatch.ports.reminder_port import ReminderTracker


class FakeReminderTracker(ReminderTracker):
    def __init__(self, cooldown: timedelta = timedelta(hours=24), clock=None):
        self.cooldown = cooldown
        self._clock = clock or (lambda: datetime.now(UTC))
        self.sent_at: dict[str, datetime] = {}
        self.fail_marking = False

    def should_send_expired_reminder(self, tenant_id):
        last_sent = self.sent_at.get(tenant_id)
        if last_sent is None:
            return True
        return self._clock() - last_sent >= self.cooldown

    def mark_expired_reminder_sent(self, tenant_id):
        if self.fail_marking:
            raise SideEffectFailure("Reminder store unavailable")
        self.sent_at[tenant_id] = self._clock()
