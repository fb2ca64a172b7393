"""Push gateway port: abstract interface for web/mobile push providers."""

from abc import ABC, abstractmethod


class PushPort(ABC):
    """Abstract interface for push notification adapters."""

    @abstractmethod
    def send(
        self,
        subscription: dict,
        title: str,
        body: str,
        data: dict | None = None,
    ) -> dict:
        """Send a push notification to one subscription.

        ``subscription`` is the stored push subscription (``endpoint`` and
        provider ``keys``).

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
