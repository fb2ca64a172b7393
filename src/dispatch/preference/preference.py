"""EventPreference aggregate: per-user opt-in flags for subscribable events.

One record per (tenant, user). Only explicit choices are stored; a kind
without an entry falls back to its ``default_enabled`` metadata.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Text

from dispatch.domain import dispatch
from dispatch.exceptions import UnknownEventKind
from dispatch.preference.events import EventPreferenceChanged, PreferencesCreated
from dispatch.taxonomy import EventKind, to_event_kind


@dispatch.aggregate
class EventPreference:
    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)

    preferences: Text()  # JSON map of event code -> bool

    created_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create_default(cls, tenant_id, user_id):
        """Create an empty preference record; every kind uses its default."""
        now = datetime.now(UTC)

        preference = cls(
            tenant_id=tenant_id,
            user_id=user_id,
            preferences=json.dumps({}),
            created_at=now,
            updated_at=now,
        )

        preference.raise_(
            PreferencesCreated(
                preference_id=str(preference.id),
                tenant_id=str(tenant_id),
                user_id=str(user_id),
                created_at=now,
            )
        )

        return preference

    # -------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------
    def set_preference(self, kind, enabled: bool):
        """Opt in to or out of a subscribable event kind."""
        try:
            kind = to_event_kind(kind)
        except UnknownEventKind as exc:
            raise ValidationError({"event_kind": [str(exc)]}) from None

        if not kind.metadata.subscribable:
            raise ValidationError({"event_kind": [f"{kind.code} is not subscribable"]})

        stored = self._stored()
        stored[kind.code] = bool(enabled)

        now = datetime.now(UTC)
        self.preferences = json.dumps(stored)
        self.updated_at = now

        self.raise_(
            EventPreferenceChanged(
                preference_id=str(self.id),
                tenant_id=str(self.tenant_id),
                user_id=str(self.user_id),
                event_kind=kind.code,
                enabled=bool(enabled),
                updated_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Query helpers
    # -------------------------------------------------------------------
    def is_enabled(self, kind) -> bool:
        kind = to_event_kind(kind)
        return self._stored().get(kind.code, kind.metadata.default_enabled)

    def as_map(self) -> dict[EventKind, bool]:
        """Effective flag for every subscribable kind."""
        return {kind: self.is_enabled(kind) for kind in EventKind if kind.metadata.subscribable}

    def _stored(self) -> dict:
        return json.loads(self.preferences) if self.preferences else {}
