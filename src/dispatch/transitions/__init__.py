from dispatch.transitions.detector import (
    APPROVED,
    TenantStatusObservation,
    TenantStatusTransitionDetector,
    TransitionOutcome,
    transition_key,
)
from dispatch.transitions.key_set import BoundedKeySet

__all__ = [
    "APPROVED",
    "BoundedKeySet",
    "TenantStatusObservation",
    "TenantStatusTransitionDetector",
    "TransitionOutcome",
    "transition_key",
]
