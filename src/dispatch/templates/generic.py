"""Generic fallback template for kinds without a dedicated message."""


class GenericTemplate:
    kinds = ()

    @staticmethod
    def render(kind, context: dict) -> dict:
        code = getattr(kind, "value", kind)
        return {"title": "Notification", "body": f"Notification: {code}"}
