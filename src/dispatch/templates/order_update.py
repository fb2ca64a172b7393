"""Order update template: payment settled, fulfilled, cancelled, payment confirmed."""

from dispatch.taxonomy import EventKind

_TITLES = {
    EventKind.ORDER_PAYMENT_SETTLED: "Payment Received",
    EventKind.ORDER_FULFILLED: "Order Fulfilled",
    EventKind.ORDER_CANCELLED: "Order Cancelled",
    EventKind.PAYMENT_CONFIRMED: "Payment Confirmed",
}

_BODIES = {
    EventKind.ORDER_PAYMENT_SETTLED: "Order #{code} payment has been settled",
    EventKind.ORDER_FULFILLED: "Order #{code} has been fulfilled",
    EventKind.ORDER_CANCELLED: "Order #{code} has been cancelled",
    EventKind.PAYMENT_CONFIRMED: "Payment for order #{code} has been confirmed",
}


class OrderUpdateTemplate:
    kinds = tuple(_TITLES)

    @staticmethod
    def render(kind: EventKind, context: dict) -> dict:
        code = context.get("order_code") or "N/A"
        return {
            "title": _TITLES[kind],
            "body": _BODIES[kind].format(code=code),
        }
