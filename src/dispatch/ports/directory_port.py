"""Directory ports: administrators, users, customers, push subscriptions, tenant status."""

from abc import ABC, abstractmethod
from typing import Optional


class AdminDirectory(ABC):
    @abstractmethod
    def list_admin_user_ids(self, tenant_id: str, include_superadmins: bool = True) -> list[str]:
        """User ids of the tenant's administrators, optionally with platform superadmins."""
        ...

    @abstractmethod
    def get_admin_name(self, tenant_id: str, user_id: str) -> Optional[str]:
        ...


class UserDirectory(ABC):
    @abstractmethod
    def get_login_identifier(self, user_id: str) -> Optional[str]:
        """The user's login identifier, which is their phone number."""
        ...


class CustomerDirectory(ABC):
    @abstractmethod
    def get_customer_phone(self, tenant_id: str, customer_id: str) -> Optional[str]:
        ...


class PushSubscriptionStore(ABC):
    @abstractmethod
    def list_subscriptions(self, tenant_id: str, user_id: str) -> list[dict]:
        """Stored push subscriptions (``endpoint`` plus provider ``keys``)."""
        ...


class TenantStatusReader(ABC):
    @abstractmethod
    def get_status(self, tenant_id: str) -> Optional[str]:
        """Authoritative current status of the tenant, read from storage."""
        ...

    @abstractmethod
    def get_company_name(self, tenant_id: str) -> Optional[str]:
        ...
