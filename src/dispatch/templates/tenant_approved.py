"""Tenant approval template: welcomes the first administrator of an approved tenant."""

from dispatch.taxonomy import EventKind


class TenantApprovedTemplate:
    kinds = (EventKind.TENANT_APPROVED,)

    @staticmethod
    def render(kind: EventKind, context: dict) -> dict:
        admin_name = context.get("admin_name") or "there"
        company_name = context.get("company_name") or "Your company"
        return {
            "title": "Account Approved",
            "body": f"Hi {admin_name}! {company_name} has been approved. Welcome aboard!",
        }
