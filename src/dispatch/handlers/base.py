"""Common contract of the delivery channel handlers."""

from abc import ABC, abstractmethod

from dispatch.event import ActionConfig, ActionResult, DispatchEvent
from dispatch.taxonomy import ActionType


class ActionHandler(ABC):
    """One delivery channel.

    ``can_handle`` is cheap and I/O-free. ``execute`` never raises: every
    internal failure comes back as an unsuccessful :class:`ActionResult`.
    """

    action_type: ActionType

    @abstractmethod
    def can_handle(self, event: DispatchEvent) -> bool:
        ...

    @abstractmethod
    def execute(self, tenant_id: str, event: DispatchEvent, config: ActionConfig) -> ActionResult:
        ...
