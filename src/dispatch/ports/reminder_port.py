"""Reminder tracker port: cooldown for "subscription expired" reminders."""

from abc import ABC, abstractmethod


class ReminderTracker(ABC):
    @abstractmethod
    def should_send_expired_reminder(self, tenant_id: str) -> bool:
        """False when a reminder was already sent inside the cooldown window."""
        ...

    @abstractmethod
    def mark_expired_reminder_sent(self, tenant_id: str) -> None:
        ...
