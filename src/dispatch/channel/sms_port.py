"""SMS gateway port: abstract interface for SMS providers."""

from abc import ABC, abstractmethod


class SMSPort(ABC):
    """Abstract interface for SMS gateway adapters."""

    @abstractmethod
    def send(self, to: str, body: str, is_otp: bool = False) -> dict:
        """Send an SMS message.

        ``is_otp`` lets providers route one-time codes through a dedicated
        sender.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
