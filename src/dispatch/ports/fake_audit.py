"""Fake audit sink: keeps audit records in memory."""

from dispatch.exceptions import SideEffectFailure
from dispatch.ports.audit_port import AuditSink


class FakeAuditSink(AuditSink):
    def __init__(self):
        self.records: list[dict] = []
        self.should_fail = False

    def record(self, tenant_id, event_name, entity_type=None, entity_id=None, actor_user_id=None, data=None):
        if self.should_fail:
            raise SideEffectFailure("Audit store unavailable")
        self.records.append(
            {
                "tenant_id": tenant_id,
                "event_name": event_name,
                "entity_type": entity_type,
                "entity_id": entity_id,
                "actor_user_id": actor_user_id,
                "data": dict(data or {}),
            }
        )

    def records_for(self, tenant_id: str) -> list[dict]:
        return [r for r in self.records if r["tenant_id"] == tenant_id]

    def reset(self):
        self.records.clear()
        self.should_fail = False
