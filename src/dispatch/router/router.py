"""Event router: the single entry point producers call to dispatch an event.

``route_event`` runs, in order:

1. background gate: worker-only kinds are skipped outside the worker process
2. audit pre-log (best effort)
3. cooldown check for "subscription expired" reminders
4. metadata lookup; an unknown kind stops the dispatch
5. effective action config: fixed default for system events, tenant
   opt-in config for subscribable ones (absent means nothing to do)
6. target set: explicit target user, else administrators for system events;
   tenant-facing subscribable events without a target are rejected
7. empty target set stops the dispatch
8. per-target fan-out across the configured handlers, honoring user
   preferences for subscribable events
9. reminder marking for "subscription expired" (best effort)

``route_event`` never raises. Handler failures are logged per handler and
never abort sibling handlers or targets.
"""

from dataclasses import replace
from typing import Optional

import structlog

from dispatch.event import ActionConfig, ActionResult, DispatchEvent
from dispatch.exceptions import ConfigurationError, RoutingPolicyViolation
from dispatch.handlers.base import ActionHandler
from dispatch.ports.audit_port import AuditSink
from dispatch.ports.directory_port import AdminDirectory
from dispatch.ports.process_role import ProcessRole
from dispatch.ports.reminder_port import ReminderTracker
from dispatch.ports.tenant_config_port import TenantConfigStore
from dispatch.preference.store import PreferenceStore
from dispatch.shared.side_effects import best_effort
from dispatch.taxonomy import (
    BACKGROUND_ONLY_KINDS,
    ActionType,
    EventKind,
    EventMetadata,
    metadata_for,
    to_event_kind,
)
from dispatch.utils.logging import bind_dispatch_context, unbind_dispatch_context

logger = structlog.get_logger(__name__)

SYSTEM_DEFAULT_ACTIONS = {
    ActionType.IN_APP: ActionConfig(enabled=True),
    ActionType.SMS: ActionConfig(enabled=True),
}

_BACKGROUND_ONLY_CODES = frozenset(kind.value for kind in BACKGROUND_ONLY_KINDS)


class EventRouter:
    def __init__(
        self,
        handlers: dict[ActionType, ActionHandler],
        config_store: TenantConfigStore,
        admins: AdminDirectory,
        preferences: PreferenceStore,
        audit: AuditSink,
        reminders: ReminderTracker,
        process_role: ProcessRole,
    ):
        self._handlers = handlers
        self._configs = config_store
        self._admins = admins
        self._preferences = preferences
        self._audit = audit
        self._reminders = reminders
        self._process_role = process_role

    def route_event(self, event: DispatchEvent) -> list[ActionResult]:
        """Dispatch ``event``; returns the handler results, empty when nothing ran."""
        code = _code_of(event.kind)
        bind_dispatch_context(tenant_id=event.tenant_id, event_kind=code)
        try:
            return self._route(event, code)
        except RoutingPolicyViolation as exc:
            logger.warning("Dispatch aborted", reason=str(exc))
        except ConfigurationError as exc:
            logger.error("Dispatch configuration error", error=str(exc), error_type=type(exc).__name__)
        except Exception as exc:
            logger.error("Unexpected dispatch failure", error=str(exc), error_type=type(exc).__name__)
        finally:
            unbind_dispatch_context("tenant_id", "event_kind")
        return []

    # -------------------------------------------------------------------
    # Orchestration
    # -------------------------------------------------------------------
    def _route(self, event: DispatchEvent, code: str) -> list[ActionResult]:
        if code in _BACKGROUND_ONLY_CODES and not self._process_role.is_worker_process():
            logger.debug("Skipping background-only event outside the worker process")
            return []

        best_effort("audit", self._audit_attempt, event, code)

        if code == EventKind.SUBSCRIPTION_EXPIRED.value:
            should_send = best_effort(
                "reminder_check", self._reminders.should_send_expired_reminder, event.tenant_id
            )
            if should_send is False:
                logger.info("Expired reminder already sent within cooldown")
                return []

        metadata = metadata_for(event.kind)
        event = replace(event, kind=to_event_kind(event.kind))

        actions = self._effective_actions(event, metadata)
        if not actions:
            return []

        targets = self._resolve_targets(event, metadata)
        if not targets:
            raise RoutingPolicyViolation(f"No targets resolved for {code}")

        results = []
        for user_id in targets:
            results.extend(self._dispatch_to_target(event.for_user(user_id), metadata, actions))

        if event.kind is EventKind.SUBSCRIPTION_EXPIRED:
            best_effort("reminder_mark", self._reminders.mark_expired_reminder_sent, event.tenant_id)

        logger.info(
            "Event dispatched",
            targets=len(targets),
            succeeded=sum(1 for r in results if r.success),
            failed=sum(1 for r in results if not r.success),
        )
        return results

    def _audit_attempt(self, event: DispatchEvent, code: str) -> None:
        self._audit.record(
            event.tenant_id,
            f"tenant_event.{code}",
            entity_type="tenant_event",
            entity_id=event.target_user_id,
            actor_user_id=event.actor_user_id or event.payload.get("user_id") or event.target_user_id,
            data={
                "event_kind": code,
                "category": event.category.value,
                "is_superadmin": event.is_superadmin,
                "target_user_id": event.target_user_id,
                "target_customer_id": event.target_customer_id,
            },
        )

    def _effective_actions(self, event: DispatchEvent, metadata: EventMetadata) -> dict[ActionType, ActionConfig]:
        if metadata.is_system_event:
            return dict(SYSTEM_DEFAULT_ACTIONS)

        config = self._configs.get(event.tenant_id) or {}
        event_config = (config.get("event_config") or {}).get(event.kind.code)
        if not event_config:
            logger.debug("Event kind not configured for tenant")
            return {}

        actions = {}
        for name, settings in event_config.items():
            try:
                action_type = ActionType(name)
            except ValueError:
                logger.warning("Unknown action type in tenant config", action=name)
                continue
            actions[action_type] = ActionConfig.from_dict(settings or {})
        return actions

    def _resolve_targets(self, event: DispatchEvent, metadata: EventMetadata) -> list[str]:
        if event.target_user_id:
            return [event.target_user_id]

        if metadata.tenant_facing and metadata.subscribable:
            raise RoutingPolicyViolation(f"{event.kind.code} requires an explicit target user")

        return list(self._admins.list_admin_user_ids(event.tenant_id, include_superadmins=True))

    def _dispatch_to_target(
        self,
        event: DispatchEvent,
        metadata: EventMetadata,
        actions: dict[ActionType, ActionConfig],
    ) -> list[ActionResult]:
        if metadata.subscribable and not self._user_opted_in(event, metadata):
            logger.debug("User opted out", user_id=event.target_user_id)
            return []

        results = []
        for action_type, config in actions.items():
            if not config.enabled:
                continue

            handler = self._handlers.get(action_type)
            if handler is None:
                logger.warning("No handler for action type", action=action_type.value)
                continue
            if not handler.can_handle(event):
                logger.debug("Handler not applicable", action=action_type.value, user_id=event.target_user_id)
                continue

            result = self._execute(handler, event, config)
            if not result.success:
                logger.warning(
                    "Delivery failed",
                    action=action_type.value,
                    user_id=event.target_user_id,
                    error=result.error,
                )
            results.append(result)
        return results

    def _user_opted_in(self, event: DispatchEvent, metadata: EventMetadata) -> bool:
        try:
            preferences = self._preferences.get_preferences(event.tenant_id, event.target_user_id)
        except Exception as exc:
            logger.warning("Preference lookup failed, using default", user_id=event.target_user_id, error=str(exc))
            return metadata.default_enabled
        return preferences.get(event.kind, metadata.default_enabled)

    def _execute(self, handler: ActionHandler, event: DispatchEvent, config: ActionConfig) -> ActionResult:
        try:
            return handler.execute(event.tenant_id, event, config)
        except Exception as exc:
            return ActionResult.failed(handler.action_type, str(exc))


def _code_of(kind) -> Optional[str]:
    return getattr(kind, "value", kind)
