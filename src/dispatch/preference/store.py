"""Preference store: effective per-kind flags for one tenant user."""

from abc import ABC, abstractmethod

from protean.utils.globals import current_domain

from dispatch.preference.preference import EventPreference
from dispatch.taxonomy import EventKind


class PreferenceStore(ABC):
    @abstractmethod
    def get_preferences(self, tenant_id: str, user_id: str) -> dict[EventKind, bool]:
        ...


def default_preferences() -> dict[EventKind, bool]:
    return {kind: kind.metadata.default_enabled for kind in EventKind if kind.metadata.subscribable}


class RepositoryPreferenceStore(PreferenceStore):
    """Reads :class:`EventPreference` records from the active domain."""

    def get_preferences(self, tenant_id, user_id):
        repo = current_domain.repository_for(EventPreference)
        prefs = repo._dao.query.filter(tenant_id=str(tenant_id), user_id=str(user_id)).all().items
        if not prefs:
            return default_preferences()
        return prefs[0].as_map()
