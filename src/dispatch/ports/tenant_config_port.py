"""Tenant configuration store port.

A tenant config is a plain dict. The dispatch core reads two sections:

- ``event_config``: ``{event code: {action type: {"enabled": bool, "limit": int?}}}``
- ``usage``: usage counters maintained by the usage ledger
"""

from abc import ABC, abstractmethod


class TenantConfigStore(ABC):
    @abstractmethod
    def get(self, tenant_id: str) -> dict | None:
        """Return the tenant's config, or None when the tenant is unknown."""
        ...

    @abstractmethod
    def update(self, tenant_id: str, partial: dict) -> dict:
        """Merge ``partial`` into the tenant's config (top-level keys) and return the result."""
        ...
