"""In-memory tenant directory implementing all directory ports."""

from dispatch.ports.directory_port import (
    AdminDirectory,
    CustomerDirectory,
    PushSubscriptionStore,
    TenantStatusReader,
    UserDirectory,
)


class FakeTenantDirectory(
    AdminDirectory,
    UserDirectory,
    CustomerDirectory,
    PushSubscriptionStore,
    TenantStatusReader,
):
    def __init__(self):
        self.admins: dict[str, list[dict]] = {}
        self.superadmin_ids: list[str] = []
        self.logins: dict[str, str] = {}
        self.customer_phones: dict[tuple[str, str], str] = {}
        self.push_subscriptions: dict[tuple[str, str], list[dict]] = {}
        self.statuses: dict[str, str] = {}
        self.company_names: dict[str, str] = {}
        self.lookups: list[tuple[str, str]] = []

    # Seeding helpers
    def add_admin(self, tenant_id, user_id, name=None, login=None):
        self.admins.setdefault(tenant_id, []).append({"user_id": user_id, "name": name})
        if login:
            self.logins[user_id] = login

    def add_superadmin(self, user_id, login=None):
        self.superadmin_ids.append(user_id)
        if login:
            self.logins[user_id] = login

    def add_user(self, user_id, login):
        self.logins[user_id] = login

    def add_customer(self, tenant_id, customer_id, phone):
        self.customer_phones[(tenant_id, customer_id)] = phone

    def add_push_subscription(self, tenant_id, user_id, endpoint, keys=None):
        self.push_subscriptions.setdefault((tenant_id, user_id), []).append(
            {"endpoint": endpoint, "keys": keys or {}}
        )

    def set_tenant(self, tenant_id, status, company_name=None):
        self.statuses[tenant_id] = status
        if company_name:
            self.company_names[tenant_id] = company_name

    # Ports
    def list_admin_user_ids(self, tenant_id, include_superadmins=True):
        user_ids = [admin["user_id"] for admin in self.admins.get(tenant_id, [])]
        if include_superadmins:
            user_ids.extend(uid for uid in self.superadmin_ids if uid not in user_ids)
        return user_ids

    def get_admin_name(self, tenant_id, user_id):
        for admin in self.admins.get(tenant_id, []):
            if admin["user_id"] == user_id:
                return admin["name"]
        return None

    def get_login_identifier(self, user_id):
        self.lookups.append(("user", user_id))
        return self.logins.get(user_id)

    def get_customer_phone(self, tenant_id, customer_id):
        self.lookups.append(("customer", customer_id))
        return self.customer_phones.get((tenant_id, customer_id))

    def list_subscriptions(self, tenant_id, user_id):
        return list(self.push_subscriptions.get((tenant_id, user_id), []))

    def get_status(self, tenant_id):
        return self.statuses.get(tenant_id)

    def get_company_name(self, tenant_id):
        return self.company_names.get(tenant_id)
