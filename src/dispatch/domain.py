"""Dispatch bounded context: tenant event routing and notification delivery.

Receives domain events tagged with a tenant id (order lifecycle, subscription
alerts, administrator actions, ML job status, tenant approval), decides who
is notified and through which channel (SMS, push, in-app), honors per-user
preferences and tracks per-tenant usage counters.
"""

import structlog
from protean.domain import Domain

dispatch = Domain(name="dispatch")

logger = structlog.get_logger(__name__)
