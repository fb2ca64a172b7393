"""Administrator activity template: admin and user accounts created or updated."""

from dispatch.taxonomy import EventKind

_ENTITY_AND_ACTION = {
    EventKind.ADMIN_CREATED: ("Administrator", "created"),
    EventKind.ADMIN_UPDATED: ("Administrator", "updated"),
    EventKind.USER_CREATED: ("User", "created"),
    EventKind.USER_UPDATED: ("User", "updated"),
}


class AdminActivityTemplate:
    kinds = tuple(_ENTITY_AND_ACTION)

    @staticmethod
    def render(kind: EventKind, context: dict) -> dict:
        entity, action = _ENTITY_AND_ACTION[kind]
        name = context.get("name") or context.get("identifier") or "An account"
        return {
            "title": f"{entity} {action.capitalize()}",
            "body": f"{entity} {name} was {action}",
        }
