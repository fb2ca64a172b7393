"""Error taxonomy for the dispatch core.

Only configuration problems are raised at startup. Everything that happens
while routing an event is logged and absorbed by the router, so callers
treat ``EventRouter.route_event`` as infallible.
"""


class DispatchError(Exception):
    """Base class for all dispatch errors."""


class ConfigurationError(DispatchError):
    """The system is misconfigured (missing metadata, process role unset)."""


class UnknownEventKind(ConfigurationError):
    """An event code has no entry in the event taxonomy."""

    def __init__(self, code):
        self.code = code
        super().__init__(f"No metadata registered for event kind: {code}")


class RoutingPolicyViolation(DispatchError):
    """A dispatch cannot be routed (missing target, empty target set)."""


class DeliveryFailure(DispatchError):
    """A channel handler could not deliver a notification."""


class SideEffectFailure(DispatchError):
    """A best-effort side effect (audit, reminder marking, tracking) failed."""


class TargetNotResolvable(DispatchError):
    """No recipient phone number could be determined."""


class InvalidPhoneNumber(TargetNotResolvable, ValueError):
    """A phone number literal does not match the accepted formats."""
