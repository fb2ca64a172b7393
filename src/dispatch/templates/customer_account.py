"""Customer account template: welcome, credit approval and balance reminders."""

from dispatch.taxonomy import EventKind


class CustomerAccountTemplate:
    kinds = (
        EventKind.CUSTOMER_CREATED,
        EventKind.CUSTOMER_CREDIT_APPROVED,
        EventKind.CUSTOMER_BALANCE_CHANGED,
        EventKind.CUSTOMER_REPAYMENT_DEADLINE,
    )

    @staticmethod
    def render(kind: EventKind, context: dict) -> dict:
        credit_limit = context.get("credit_limit") or "N/A"
        outstanding = context.get("outstanding_amount") or "N/A"

        if kind is EventKind.CUSTOMER_CREATED:
            return {"title": "Welcome", "body": "Welcome! Your account has been created."}
        if kind is EventKind.CUSTOMER_CREDIT_APPROVED:
            return {
                "title": "Credit Approved",
                "body": f"Your credit account has been approved. Credit limit: {credit_limit}",
            }
        if kind is EventKind.CUSTOMER_BALANCE_CHANGED:
            return {
                "title": "Balance Updated",
                "body": f"Your outstanding balance has changed to: {outstanding}",
            }
        return {
            "title": "Repayment Reminder",
            "body": f"Reminder: Your repayment deadline is approaching. Outstanding: {outstanding}",
        }
