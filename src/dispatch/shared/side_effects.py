"""Best-effort execution of side effects that must never block a dispatch.

Audit writes, reminder marking and usage tracking all go through
:func:`best_effort`: a failure is logged on the side channel and the caller
carries on with ``None``.
"""

import structlog

logger = structlog.get_logger(__name__)


def best_effort(label: str, fn, *args, **kwargs):
    """Call ``fn(*args, **kwargs)``; log and return ``None`` if it raises."""
    try:
        return fn(*args, **kwargs)
    except Exception as exc:
        logger.warning(
            "Side effect failed",
            side_effect=label,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return None
