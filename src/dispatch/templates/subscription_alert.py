"""Subscription alert template: expiring soon, expired, renewed."""

from dispatch.taxonomy import EventKind


class SubscriptionAlertTemplate:
    kinds = (
        EventKind.SUBSCRIPTION_EXPIRING_SOON,
        EventKind.SUBSCRIPTION_EXPIRED,
        EventKind.SUBSCRIPTION_RENEWED,
    )

    @staticmethod
    def render(kind: EventKind, context: dict) -> dict:
        if kind is EventKind.SUBSCRIPTION_EXPIRING_SOON:
            days = context.get("days_remaining") or "a few"
            return {
                "title": "Subscription Expiring Soon",
                "body": f"Your subscription expires in {days} days",
            }
        if kind is EventKind.SUBSCRIPTION_EXPIRED:
            return {
                "title": "Subscription Expired",
                "body": "Your subscription has expired. Please renew to continue.",
            }
        return {
            "title": "Subscription Renewed",
            "body": "Your subscription has been renewed successfully.",
        }
