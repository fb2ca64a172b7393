"""Tenant status transition detector.

The tenant-status observer may fire more than once for one logical change,
sometimes concurrently, and with an entity snapshot taken either before or
after the update. The detector reduces those observations to genuine
transitions and fires the approval notification at most once per
``(tenant, old, new)`` transition held in the bounded history.

Per observation:

1. ignore it unless the change set carries ``status``
2. check-and-set the per-tenant processing guard under the lock
3. reconstruct ``old``: if the new value equals the stored status and the
   snapshot differs, the snapshot is ``old``; if all three agree there is
   no change; otherwise the stored status is ``old``
4. drop it when either side is unknown or ``old == new``
5. drop it when ``{tenant}:{old}->{new}`` is already in the history,
   otherwise record the key
6. a transition into ``approved`` notifies the tenant's first administrator
7. release the guard on every exit path
"""

import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import structlog

from dispatch.event import DispatchEvent
from dispatch.ports.directory_port import AdminDirectory, TenantStatusReader
from dispatch.router.router import EventRouter
from dispatch.shared.side_effects import best_effort
from dispatch.taxonomy import ActionCategory, EventKind
from dispatch.transitions.key_set import BoundedKeySet

logger = structlog.get_logger(__name__)

APPROVED = "approved"


@dataclass(frozen=True)
class TenantStatusObservation:
    tenant_id: str
    changes: dict[str, Any] = field(default_factory=dict)
    snapshot_status: Optional[str] = None


class TransitionOutcome(Enum):
    NO_STATUS_CHANGE = "no_status_change"
    ALREADY_PROCESSING = "already_processing"
    UNKNOWN_STATUS = "unknown_status"
    UNCHANGED = "unchanged"
    DUPLICATE = "duplicate"
    RECORDED = "recorded"
    APPROVED = "approved"


def transition_key(tenant_id: str, old: Optional[str], new: Optional[str]) -> str:
    return f"{tenant_id}:{old}->{new}"


class TenantStatusTransitionDetector:
    def __init__(
        self,
        router: EventRouter,
        status_reader: TenantStatusReader,
        admins: AdminDirectory,
        history: Optional[BoundedKeySet] = None,
    ):
        self._router = router
        self._status = status_reader
        self._admins = admins
        self.history = history if history is not None else BoundedKeySet()
        self._processing: set[str] = set()
        self._lock = threading.Lock()

    def observe(self, observation: TenantStatusObservation) -> TransitionOutcome:
        if "status" not in observation.changes:
            return TransitionOutcome.NO_STATUS_CHANGE

        tenant_id = observation.tenant_id
        with self._lock:
            if tenant_id in self._processing:
                logger.debug("Tenant status change already being processed", tenant_id=tenant_id)
                return TransitionOutcome.ALREADY_PROCESSING
            self._processing.add(tenant_id)

        try:
            return self._process(observation)
        finally:
            with self._lock:
                self._processing.discard(tenant_id)

    def is_processing(self, tenant_id: str) -> bool:
        with self._lock:
            return tenant_id in self._processing

    def _process(self, observation: TenantStatusObservation) -> TransitionOutcome:
        tenant_id = observation.tenant_id
        new_status = observation.changes["status"]
        stored_status = self._status.get_status(tenant_id)
        snapshot_status = observation.snapshot_status

        if new_status == stored_status and snapshot_status != stored_status:
            old_status = snapshot_status
        elif new_status == stored_status == snapshot_status:
            return TransitionOutcome.UNCHANGED
        else:
            old_status = stored_status

        if not old_status or not new_status:
            logger.debug(
                "Tenant status unknown on one side", tenant_id=tenant_id, old_status=old_status, new_status=new_status
            )
            return TransitionOutcome.UNKNOWN_STATUS

        if old_status == new_status:
            return TransitionOutcome.UNCHANGED

        key = transition_key(tenant_id, old_status, new_status)
        with self._lock:
            if not self.history.add(key):
                logger.debug("Duplicate tenant status transition", transition=key)
                return TransitionOutcome.DUPLICATE

        logger.info("Tenant status transition", tenant_id=tenant_id, old_status=old_status, new_status=new_status)

        if new_status != APPROVED:
            return TransitionOutcome.RECORDED

        best_effort("approval_notification", self._notify_approval, tenant_id)
        return TransitionOutcome.APPROVED

    def _notify_approval(self, tenant_id: str) -> None:
        admin_ids = self._admins.list_admin_user_ids(tenant_id, include_superadmins=False)
        if not admin_ids:
            logger.warning("Approved tenant has no administrator to notify", tenant_id=tenant_id)
            return

        admin_id = admin_ids[0]
        event = DispatchEvent(
            kind=EventKind.TENANT_APPROVED,
            tenant_id=tenant_id,
            category=ActionCategory.SYSTEM_NOTIFICATION,
            payload={
                "company_name": self._status.get_company_name(tenant_id),
                "admin_name": self._admins.get_admin_name(tenant_id, admin_id),
            },
            target_user_id=admin_id,
        )
        self._router.route_event(event)
