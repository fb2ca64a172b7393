"""ML job status template: training and extraction lifecycle updates."""

from dispatch.taxonomy import EventKind

_OPERATION_AND_STATUS = {
    EventKind.ML_TRAINING_STARTED: ("training", "started"),
    EventKind.ML_TRAINING_PROGRESS: ("training", "in progress"),
    EventKind.ML_TRAINING_COMPLETED: ("training", "completed"),
    EventKind.ML_TRAINING_FAILED: ("training", "failed"),
    EventKind.ML_EXTRACTION_QUEUED: ("extraction", "queued"),
    EventKind.ML_EXTRACTION_STARTED: ("extraction", "started"),
    EventKind.ML_EXTRACTION_COMPLETED: ("extraction", "completed"),
    EventKind.ML_EXTRACTION_FAILED: ("extraction", "failed"),
}


class MLStatusTemplate:
    kinds = tuple(_OPERATION_AND_STATUS)

    @staticmethod
    def render(kind: EventKind, context: dict) -> dict:
        operation, status = _OPERATION_AND_STATUS[kind]
        body = f"Model {operation} {status}"
        if context.get("progress") is not None and kind is EventKind.ML_TRAINING_PROGRESS:
            body = f"{body} ({context['progress']}%)"
        if context.get("error") and status == "failed":
            body = f"{body}: {context['error']}"
        return {"title": f"ML {operation.capitalize()} Update", "body": body}
