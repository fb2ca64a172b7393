"""Preference management command + handler."""

from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from dispatch.domain import dispatch
from dispatch.preference.preference import EventPreference


@dispatch.command(part_of="EventPreference")
class SetEventPreference:
    """Opt a tenant user in to or out of one event kind."""

    tenant_id: Identifier(required=True)
    user_id: Identifier(required=True)
    event_kind: String(required=True, max_length=100)
    enabled: Boolean(required=True)


@dispatch.command_handler(part_of=EventPreference)
class ManageEventPreferencesHandler:
    @handle(SetEventPreference)
    def set_preference(self, command: SetEventPreference):
        repo = current_domain.repository_for(EventPreference)
        prefs = (
            repo._dao.query.filter(tenant_id=str(command.tenant_id), user_id=str(command.user_id)).all().items
        )
        preference = prefs[0] if prefs else EventPreference.create_default(command.tenant_id, command.user_id)
        preference.set_preference(command.event_kind, command.enabled)
        repo.add(preference)
