"""In-memory tenant configuration store."""

import copy

from dispatch.ports.tenant_config_port import TenantConfigStore


class FakeTenantConfigStore(TenantConfigStore):
    def __init__(self, configs: dict | None = None):
        self._configs: dict[str, dict] = copy.deepcopy(configs or {})

    def get(self, tenant_id):
        config = self._configs.get(tenant_id)
        return copy.deepcopy(config) if config is not None else None

    def update(self, tenant_id, partial):
        config = self._configs.setdefault(tenant_id, {})
        config.update(copy.deepcopy(partial))
        return copy.deepcopy(config)

    def set_event_config(self, tenant_id: str, kind, actions: dict):
        """Enable actions for one kind, e.g. ``{"sms": {"enabled": True}}``."""
        code = getattr(kind, "value", kind)
        config = self._configs.setdefault(tenant_id, {})
        config.setdefault("event_config", {})[code] = copy.deepcopy(actions)

    def reset(self):
        self._configs.clear()
