"""Value types that flow through the router and the channel handlers."""

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from dispatch.taxonomy import ActionCategory, ActionType, EventKind


@dataclass(frozen=True)
class DispatchEvent:
    """One domain occurrence to be routed for a tenant.

    ``payload`` may carry an explicit ``phone_number`` that takes precedence
    over any looked-up recipient phone.
    """

    kind: EventKind
    tenant_id: str
    category: ActionCategory
    payload: dict[str, Any] = field(default_factory=dict)
    target_user_id: Optional[str] = None
    target_customer_id: Optional[str] = None
    actor_user_id: Optional[str] = None
    is_superadmin: bool = False

    @property
    def phone_number(self) -> Optional[str]:
        return self.payload.get("phone_number") or None

    def for_user(self, user_id: str) -> "DispatchEvent":
        """Copy of this event addressed to a single target user."""
        return replace(self, target_user_id=user_id)


@dataclass(frozen=True)
class ActionConfig:
    enabled: bool = True
    limit: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ActionConfig":
        limit = data.get("limit")
        return cls(enabled=bool(data.get("enabled", False)), limit=int(limit) if limit is not None else None)


@dataclass
class ActionResult:
    success: bool
    action_type: ActionType
    error: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def failed(cls, action_type: ActionType, error: str) -> "ActionResult":
        return cls(success=False, action_type=action_type, error=error)
