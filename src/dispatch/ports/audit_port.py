"""Audit sink port: write-only destination for dispatch audit records."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class AuditSink(ABC):
    @abstractmethod
    def record(
        self,
        tenant_id: str,
        event_name: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
        actor_user_id: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> None:
        """Persist one audit record. Callers treat this as fire-and-forget."""
        ...
