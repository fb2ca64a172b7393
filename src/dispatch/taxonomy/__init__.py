"""Event taxonomy registry."""

from dispatch.taxonomy.kinds import (
    BACKGROUND_ONLY_KINDS,
    ActionCategory,
    ActionType,
    EventKind,
    EventMetadata,
    category_for_sms,
    metadata_for,
    to_event_kind,
)

__all__ = [
    "ActionCategory",
    "ActionType",
    "BACKGROUND_ONLY_KINDS",
    "EventKind",
    "EventMetadata",
    "category_for_sms",
    "metadata_for",
    "to_event_kind",
]
