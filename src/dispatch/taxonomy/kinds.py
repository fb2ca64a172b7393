"""Event taxonomy: the closed set of event kinds and their routing metadata.

Each :class:`EventKind` member is declared together with its
:class:`EventMetadata`, so the metadata table is total over the enumeration
by construction: a kind cannot exist without its routing rules.
"""

from dataclasses import dataclass
from enum import Enum

from dispatch.exceptions import UnknownEventKind


class ActionCategory(Enum):
    AUTHENTICATION = "Authentication"
    CUSTOMER_COMMUNICATION = "CustomerCommunication"
    SYSTEM_NOTIFICATION = "SystemNotification"


class ActionType(Enum):
    SMS = "sms"
    PUSH = "push"
    IN_APP = "in_app"


@dataclass(frozen=True)
class EventMetadata:
    subscribable: bool
    tenant_facing: bool
    default_enabled: bool
    category: ActionCategory

    @property
    def is_system_event(self) -> bool:
        """Non-subscribable, non-tenant-facing events go to administrators by fixed policy."""
        return not self.subscribable and not self.tenant_facing


_TENANT_FACING_SYSTEM = EventMetadata(
    subscribable=True,
    tenant_facing=True,
    default_enabled=True,
    category=ActionCategory.SYSTEM_NOTIFICATION,
)
_CUSTOMER_COMMUNICATION = EventMetadata(
    subscribable=True,
    tenant_facing=True,
    default_enabled=True,
    category=ActionCategory.CUSTOMER_COMMUNICATION,
)
_SYSTEM_SILENT = EventMetadata(
    subscribable=False,
    tenant_facing=False,
    default_enabled=False,
    category=ActionCategory.SYSTEM_NOTIFICATION,
)
_SYSTEM_ALERT = EventMetadata(
    subscribable=False,
    tenant_facing=False,
    default_enabled=True,
    category=ActionCategory.SYSTEM_NOTIFICATION,
)


class EventKind(Enum):
    """All event kinds the router understands.

    Naming convention: ``{entity}.{occurrence}``.
    """

    def __new__(cls, code: str, metadata: EventMetadata):
        member = object.__new__(cls)
        member._value_ = code
        member.metadata = metadata
        return member

    # Order lifecycle
    ORDER_PAYMENT_SETTLED = ("order.payment_settled", _TENANT_FACING_SYSTEM)
    ORDER_FULFILLED = ("order.fulfilled", _TENANT_FACING_SYSTEM)
    ORDER_CANCELLED = ("order.cancelled", _TENANT_FACING_SYSTEM)
    PAYMENT_CONFIRMED = ("payment.confirmed", _TENANT_FACING_SYSTEM)

    # Inventory
    STOCK_LOW_ALERT = ("stock.low_alert", _SYSTEM_SILENT)

    # ML jobs
    ML_TRAINING_STARTED = ("ml.training_started", _SYSTEM_SILENT)
    ML_TRAINING_PROGRESS = ("ml.training_progress", _SYSTEM_SILENT)
    ML_TRAINING_COMPLETED = ("ml.training_completed", _SYSTEM_SILENT)
    ML_TRAINING_FAILED = ("ml.training_failed", _SYSTEM_SILENT)
    ML_EXTRACTION_QUEUED = ("ml.extraction_queued", _SYSTEM_SILENT)
    ML_EXTRACTION_STARTED = ("ml.extraction_started", _SYSTEM_SILENT)
    ML_EXTRACTION_COMPLETED = ("ml.extraction_completed", _SYSTEM_SILENT)
    ML_EXTRACTION_FAILED = ("ml.extraction_failed", _SYSTEM_SILENT)

    # Customer communication
    CUSTOMER_CREATED = ("customer.created", _CUSTOMER_COMMUNICATION)
    CUSTOMER_CREDIT_APPROVED = ("customer.credit_approved", _CUSTOMER_COMMUNICATION)
    CUSTOMER_BALANCE_CHANGED = ("customer.balance_changed", _CUSTOMER_COMMUNICATION)
    CUSTOMER_REPAYMENT_DEADLINE = ("customer.repayment_deadline", _CUSTOMER_COMMUNICATION)

    # Administrator management
    ADMIN_CREATED = ("admin.created", _SYSTEM_SILENT)
    ADMIN_UPDATED = ("admin.updated", _SYSTEM_SILENT)
    USER_CREATED = ("user.created", _SYSTEM_SILENT)
    USER_UPDATED = ("user.updated", _SYSTEM_SILENT)

    # Subscription lifecycle
    SUBSCRIPTION_EXPIRING_SOON = ("subscription.expiring_soon", _SYSTEM_ALERT)
    SUBSCRIPTION_EXPIRED = ("subscription.expired", _SYSTEM_ALERT)
    SUBSCRIPTION_RENEWED = ("subscription.renewed", _SYSTEM_ALERT)

    # Tenant status
    TENANT_APPROVED = ("tenant.approved", _SYSTEM_ALERT)

    @property
    def code(self) -> str:
        return self.value


# Kinds produced by scheduled jobs; only a declared worker process routes them.
BACKGROUND_ONLY_KINDS = frozenset(
    {
        EventKind.SUBSCRIPTION_EXPIRED,
        EventKind.SUBSCRIPTION_EXPIRING_SOON,
        EventKind.ML_EXTRACTION_QUEUED,
        EventKind.ML_EXTRACTION_STARTED,
        EventKind.ML_EXTRACTION_COMPLETED,
        EventKind.ML_EXTRACTION_FAILED,
    }
)

_CUSTOMER_COMMUNICATION_KINDS = frozenset(
    kind for kind in EventKind if kind.metadata.category is ActionCategory.CUSTOMER_COMMUNICATION
)


def to_event_kind(kind) -> EventKind:
    """Coerce an :class:`EventKind` or its string code; unknown codes raise."""
    if isinstance(kind, EventKind):
        return kind
    try:
        return EventKind(kind)
    except ValueError:
        raise UnknownEventKind(kind) from None


def metadata_for(kind) -> EventMetadata:
    return to_event_kind(kind).metadata


def category_for_sms(kind) -> ActionCategory:
    """Usage category an outbound SMS for ``kind`` is counted under."""
    if to_event_kind(kind) in _CUSTOMER_COMMUNICATION_KINDS:
        return ActionCategory.CUSTOMER_COMMUNICATION
    return ActionCategory.SYSTEM_NOTIFICATION
