"""Gateway registry: pluggable SMS and push providers.

Provides singleton access to gateway adapters. Uses fake adapters by
default; a provider-backed adapter is selected with ``DISPATCH_SMS_ADAPTER``
/ ``DISPATCH_PUSH_ADAPTER`` once one is installed.
"""

import os

from dispatch.taxonomy import ActionType

_gateway_instances: dict[ActionType, object] = {}


def get_gateway(action_type: ActionType, adapter: str | None = None):
    """Return the configured gateway adapter (singleton per action type).

    Args:
        action_type: ``ActionType.SMS`` or ``ActionType.PUSH``
        adapter: adapter name; defaults to the ``DISPATCH_*_ADAPTER`` variable
    """
    if action_type not in _gateway_instances:
        if action_type is ActionType.SMS:
            adapter = adapter or os.environ.get("DISPATCH_SMS_ADAPTER", "fake")
            if adapter != "fake":
                raise ValueError(f"Unknown SMS adapter: {adapter}")

            from dispatch.channel.fake_sms import FakeSMSAdapter

            _gateway_instances[action_type] = FakeSMSAdapter()
        elif action_type is ActionType.PUSH:
            adapter = adapter or os.environ.get("DISPATCH_PUSH_ADAPTER", "fake")
            if adapter != "fake":
                raise ValueError(f"Unknown push adapter: {adapter}")

            from dispatch.channel.fake_push import FakePushAdapter

            _gateway_instances[action_type] = FakePushAdapter()
        else:
            raise ValueError(f"No external gateway for action type: {action_type}")

    return _gateway_instances[action_type]


def reset_gateways():
    """Reset all gateway singletons (useful for testing)."""
    _gateway_instances.clear()
