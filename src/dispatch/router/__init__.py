from dispatch.router.order_events import ORDER_STATE_KINDS, route_order_transition
from dispatch.router.router import SYSTEM_DEFAULT_ACTIONS, EventRouter

__all__ = ["EventRouter", "ORDER_STATE_KINDS", "SYSTEM_DEFAULT_ACTIONS", "route_order_transition"]
