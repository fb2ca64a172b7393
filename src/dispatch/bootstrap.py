"""Startup wiring: build the dispatch core once per process.

Collaborators default to the in-memory adapters; deployments pass their own
implementations of the ports. The process role is resolved here so an
undeclared role fails at startup rather than on the first background event.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

import structlog

from dispatch.channel import get_gateway
from dispatch.channel.push_port import PushPort
from dispatch.channel.sms_port import SMSPort
from dispatch.config import Settings
from dispatch.handlers import ActionHandler, build_handler_map
from dispatch.ports.audit_port import AuditSink
from dispatch.ports.directory_port import AdminDirectory
from dispatch.ports.fake_audit import FakeAuditSink
from dispatch.ports.fake_directory import FakeTenantDirectory
from dispatch.ports.fake_reminder import FakeReminderTracker
from dispatch.ports.fake_tenant_config import FakeTenantConfigStore
from dispatch.ports.process_role import ProcessRole
from dispatch.ports.reminder_port import ReminderTracker
from dispatch.ports.tenant_config_port import TenantConfigStore
from dispatch.preference.store import PreferenceStore, RepositoryPreferenceStore
from dispatch.router.router import EventRouter
from dispatch.targets.resolver import TargetResolver
from dispatch.taxonomy import ActionType
from dispatch.transitions.detector import TenantStatusTransitionDetector
from dispatch.transitions.key_set import BoundedKeySet
from dispatch.usage.ledger import UsageLedger
from dispatch.usage.sms import TenantSmsService
from dispatch.utils.logging import configure_logging

logger = structlog.get_logger(__name__)


@dataclass
class DispatchCore:
    settings: Settings
    process_role: ProcessRole
    config_store: TenantConfigStore
    directory: AdminDirectory
    audit: AuditSink
    reminders: ReminderTracker
    preferences: PreferenceStore
    sms_gateway: SMSPort
    push_gateway: PushPort
    ledger: UsageLedger
    sms_service: TenantSmsService
    resolver: TargetResolver
    handlers: dict[ActionType, ActionHandler]
    router: EventRouter
    detector: TenantStatusTransitionDetector


def build_dispatch_core(
    settings: Optional[Settings] = None,
    *,
    process_role: Optional[ProcessRole] = None,
    config_store: Optional[TenantConfigStore] = None,
    directory=None,
    audit: Optional[AuditSink] = None,
    reminders: Optional[ReminderTracker] = None,
    preferences: Optional[PreferenceStore] = None,
    sms_gateway: Optional[SMSPort] = None,
    push_gateway: Optional[PushPort] = None,
) -> DispatchCore:
    """Wire every component of the dispatch core.

    ``directory`` must implement all directory ports (administrators, users,
    customers, push subscriptions and tenant status).

    Raises:
        ConfigurationError: when no process role is given and the settings
            do not declare one.
    """
    settings = settings or Settings.from_env()
    process_role = process_role or ProcessRole.from_settings(settings)

    config_store = config_store or FakeTenantConfigStore()
    directory = directory or FakeTenantDirectory()
    audit = audit or FakeAuditSink()
    reminders = reminders or FakeReminderTracker(cooldown=timedelta(hours=settings.reminder_cooldown_hours))
    preferences = preferences or RepositoryPreferenceStore()
    sms_gateway = sms_gateway or get_gateway(ActionType.SMS, settings.sms_adapter)
    push_gateway = push_gateway or get_gateway(ActionType.PUSH, settings.push_adapter)

    ledger = UsageLedger(config_store)
    sms_service = TenantSmsService(sms_gateway, ledger)
    resolver = TargetResolver(users=directory, customers=directory)
    handlers = build_handler_map(resolver, sms_service, ledger, push_gateway, directory)

    router = EventRouter(
        handlers=handlers,
        config_store=config_store,
        admins=directory,
        preferences=preferences,
        audit=audit,
        reminders=reminders,
        process_role=process_role,
    )
    detector = TenantStatusTransitionDetector(
        router=router,
        status_reader=directory,
        admins=directory,
        history=BoundedKeySet(settings.transition_history_size),
    )

    logger.info(
        "Dispatch core ready",
        process_role=process_role.role.value,
        handlers=sorted(action.value for action in handlers),
    )

    return DispatchCore(
        settings=settings,
        process_role=process_role,
        config_store=config_store,
        directory=directory,
        audit=audit,
        reminders=reminders,
        preferences=preferences,
        sms_gateway=sms_gateway,
        push_gateway=push_gateway,
        ledger=ledger,
        sms_service=sms_service,
        resolver=resolver,
        handlers=handlers,
        router=router,
        detector=detector,
    )


def start(settings: Optional[Settings] = None, **collaborators) -> DispatchCore:
    """Process entry point: configure logging, then build the core."""
    configure_logging()
    return build_dispatch_core(settings, **collaborators)
