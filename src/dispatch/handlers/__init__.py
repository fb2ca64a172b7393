"""Delivery channel handlers, selected by :class:`ActionType`."""

from dispatch.channel.push_port import PushPort
from dispatch.handlers.base import ActionHandler
from dispatch.handlers.in_app import InAppActionHandler
from dispatch.handlers.push import PushActionHandler
from dispatch.handlers.sms import SMSActionHandler
from dispatch.ports.directory_port import PushSubscriptionStore
from dispatch.targets.resolver import TargetResolver
from dispatch.taxonomy import ActionType
from dispatch.usage.ledger import UsageLedger
from dispatch.usage.sms import TenantSmsService


def build_handler_map(
    resolver: TargetResolver,
    sms_service: TenantSmsService,
    ledger: UsageLedger,
    push_gateway: PushPort,
    subscriptions: PushSubscriptionStore,
) -> dict[ActionType, ActionHandler]:
    return {
        ActionType.SMS: SMSActionHandler(resolver, sms_service, ledger),
        ActionType.PUSH: PushActionHandler(push_gateway, subscriptions),
        ActionType.IN_APP: InAppActionHandler(),
    }


__all__ = [
    "ActionHandler",
    "InAppActionHandler",
    "PushActionHandler",
    "SMSActionHandler",
    "build_handler_map",
]
