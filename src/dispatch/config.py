"""Process settings for the dispatch core, read from the environment.

The process role is never inferred: background-only events must run in
exactly one designated worker, so an unset role fails fast at startup.
"""

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from dispatch.exceptions import ConfigurationError

PROCESS_ROLE_ENV = "DISPATCH_PROCESS_ROLE"


class ProcessRoleName(Enum):
    SERVER = "server"
    WORKER = "worker"


class Settings(BaseModel):
    process_role: Optional[str] = Field(default=None)
    transition_history_size: int = Field(default=200, ge=1)
    reminder_cooldown_hours: int = Field(default=24, ge=0)
    sms_adapter: str = Field(default="fake")
    push_adapter: str = Field(default="fake")

    @field_validator("process_role")
    @classmethod
    def _normalize_role(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip().lower() or None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            process_role=os.getenv(PROCESS_ROLE_ENV),
            transition_history_size=int(os.getenv("DISPATCH_TRANSITION_HISTORY_SIZE", "200")),
            reminder_cooldown_hours=int(os.getenv("DISPATCH_REMINDER_COOLDOWN_HOURS", "24")),
            sms_adapter=os.getenv("DISPATCH_SMS_ADAPTER", "fake"),
            push_adapter=os.getenv("DISPATCH_PUSH_ADAPTER", "fake"),
        )

    def require_process_role(self) -> ProcessRoleName:
        """Return the declared role or raise if it is missing or unknown."""
        if self.process_role is None:
            raise ConfigurationError(
                f"{PROCESS_ROLE_ENV} must be set to 'server' or 'worker' before startup"
            )
        try:
            return ProcessRoleName(self.process_role)
        except ValueError:
            raise ConfigurationError(
                f"Unknown {PROCESS_ROLE_ENV} value: {self.process_role!r} (expected 'server' or 'worker')"
            ) from None
