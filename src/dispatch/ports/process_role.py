"""Process role: whether this process is the designated background worker."""

from dispatch.config import ProcessRoleName, Settings


class ProcessRole:
    """Explicitly declared role of the running process.

    Constructing from settings fails fast with ``ConfigurationError`` when
    the role is unset, so a misconfigured deployment never silently runs
    background-only routing twice (or not at all).
    """

    def __init__(self, role: ProcessRoleName):
        self.role = role

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProcessRole":
        return cls(settings.require_process_role())

    def is_worker_process(self) -> bool:
        return self.role is ProcessRoleName.WORKER
