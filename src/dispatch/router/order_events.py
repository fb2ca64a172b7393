"""Order lifecycle producer: turns order state changes into dispatch events."""

from typing import Optional

import structlog

from dispatch.event import DispatchEvent
from dispatch.router.router import EventRouter
from dispatch.taxonomy import EventKind

logger = structlog.get_logger(__name__)

ORDER_STATE_KINDS = {
    "PaymentSettled": EventKind.ORDER_PAYMENT_SETTLED,
    "Fulfilled": EventKind.ORDER_FULFILLED,
    "Cancelled": EventKind.ORDER_CANCELLED,
}


def route_order_transition(
    router: EventRouter,
    tenant_id: str,
    order_code: str,
    order_id: str,
    to_state: str,
    customer_id: Optional[str] = None,
    customer_user_id: Optional[str] = None,
    actor_user_id: Optional[str] = None,
):
    """Route the customer notification for an order entering ``to_state``.

    States without a notification are ignored. The customer's user is the
    explicit target, so a customer without a user account gets nothing.
    """
    kind = ORDER_STATE_KINDS.get(to_state)
    if kind is None:
        logger.debug("Order state has no notification", tenant_id=tenant_id, to_state=to_state)
        return []

    event = DispatchEvent(
        kind=kind,
        tenant_id=tenant_id,
        category=kind.metadata.category,
        payload={
            "order_id": order_id,
            "order_code": order_code,
            "customer_id": customer_id,
            "state": to_state,
        },
        target_user_id=customer_user_id,
        target_customer_id=customer_id,
        actor_user_id=actor_user_id,
    )
    return router.route_event(event)
