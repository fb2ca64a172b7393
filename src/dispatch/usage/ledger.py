"""Usage ledger: per-tenant action counters for rate limiting and monitoring.

Counters live in the ``usage`` section of the tenant config:

- ``kind:<event code>`` per event kind
- ``category:<category>`` per action category
- ``auth:otp`` one-time-code SMS sends (Authentication category)
- ``total`` every tracked action

Tracking reads the config, increments in memory and writes the whole
section back. Concurrent trackers for one tenant may lose increments
(last writer wins); rate limits built on these counters are approximate.
"""

from datetime import UTC, datetime
from typing import Optional

import structlog

from dispatch.ports.tenant_config_port import TenantConfigStore
from dispatch.taxonomy import ActionCategory, EventKind, to_event_kind

logger = structlog.get_logger(__name__)

USAGE_SECTION = "usage"
OTP_COUNTER = "auth:otp"
TOTAL_COUNTER = "total"
RESET_PERIODS = ("daily", "monthly")


def kind_counter(kind) -> str:
    return f"kind:{to_event_kind(kind).value}"


def category_counter(category: ActionCategory) -> str:
    return f"category:{category.value}"


class UsageLedger:
    def __init__(self, config_store: TenantConfigStore, clock=None):
        self._configs = config_store
        self._clock = clock or (lambda: datetime.now(UTC))

    # -------------------------------------------------------------------
    # Tracking
    # -------------------------------------------------------------------
    def track(
        self,
        tenant_id: str,
        kind: Optional[EventKind],
        category: ActionCategory,
        meta: Optional[dict] = None,
    ) -> None:
        """Increment the kind (or OTP), category and global counters.

        Failures are logged and swallowed; tracking never blocks a send.
        """
        meta = meta or {}
        try:
            config = self._configs.get(tenant_id)
            if config is None:
                logger.warning("Tenant not found for usage tracking", tenant_id=tenant_id)
                return

            usage = dict(config.get(USAGE_SECTION) or {})

            if category is ActionCategory.AUTHENTICATION and meta.get("is_otp"):
                _increment(usage, OTP_COUNTER)
            elif kind is not None:
                _increment(usage, kind_counter(kind))

            _increment(usage, category_counter(category))
            _increment(usage, TOTAL_COUNTER)

            self._configs.update(tenant_id, {USAGE_SECTION: usage})

            logger.debug(
                "Tracked action",
                tenant_id=tenant_id,
                kind=getattr(kind, "value", kind),
                category=category.value,
            )
        except Exception as exc:
            logger.error(
                "Failed to track action",
                tenant_id=tenant_id,
                kind=getattr(kind, "value", kind),
                error=str(exc),
            )

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_kind_count(self, tenant_id: str, kind) -> int:
        return self._read(tenant_id, kind_counter(kind))

    def get_category_count(self, tenant_id: str, category: ActionCategory) -> int:
        return self._read(tenant_id, category_counter(category))

    def get_otp_count(self, tenant_id: str) -> int:
        return self._read(tenant_id, OTP_COUNTER)

    def get_total_count(self, tenant_id: str) -> int:
        return self._read(tenant_id, TOTAL_COUNTER)

    def check_limit(self, tenant_id: str, kind, limit: Optional[int]) -> bool:
        """True when the kind's counter has reached ``limit``; ``None`` is unlimited."""
        if limit is None:
            return False
        return self.get_kind_count(tenant_id, kind) >= limit

    def check_category_limit(self, tenant_id: str, category: ActionCategory, limit: Optional[int]) -> bool:
        if limit is None:
            return False
        return self.get_category_count(tenant_id, category) >= limit

    # -------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------
    def reset_counts(self, tenant_id: str, period: str) -> None:
        """Zero every counter and stamp the reset time and period."""
        if period not in RESET_PERIODS:
            raise ValueError(f"Unknown reset period: {period!r} (expected one of {RESET_PERIODS})")

        try:
            config = self._configs.get(tenant_id)
            if config is None:
                return

            usage = {kind_counter(kind): 0 for kind in EventKind}
            usage.update({category_counter(category): 0 for category in ActionCategory})
            usage[OTP_COUNTER] = 0
            usage[TOTAL_COUNTER] = 0
            usage["last_reset_at"] = self._clock().isoformat()
            usage["reset_period"] = period

            self._configs.update(tenant_id, {USAGE_SECTION: usage})
            logger.info("Reset usage counters", tenant_id=tenant_id, period=period)
        except Exception as exc:
            logger.error("Failed to reset usage counters", tenant_id=tenant_id, error=str(exc))

    def _read(self, tenant_id: str, counter: str) -> int:
        config = self._configs.get(tenant_id)
        if config is None:
            return 0
        return int((config.get(USAGE_SECTION) or {}).get(counter, 0))


def _increment(usage: dict, counter: str) -> None:
    usage[counter] = int(usage.get(counter, 0)) + 1
