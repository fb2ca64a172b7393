"""Low stock alert template: sent to administrators."""

from dispatch.taxonomy import EventKind


class StockAlertTemplate:
    kinds = (EventKind.STOCK_LOW_ALERT,)

    @staticmethod
    def render(kind: EventKind, context: dict) -> dict:
        product = context.get("product_name") or context.get("product_id") or "A product"
        quantity = context.get("quantity")
        body = f"{product} is running low on stock"
        if quantity is not None:
            body = f"{body} ({quantity} left)"
        return {"title": "Low Stock Alert", "body": body}
