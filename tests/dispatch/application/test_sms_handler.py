"""Tests for the SMS delivery handler."""

import pytest

from dispatch.event import ActionConfig, DispatchEvent
from dispatch.handlers.sms import RATE_LIMIT_EXCEEDED, SMSActionHandler
from dispatch.targets.resolver import TargetResolver
from dispatch.taxonomy import ActionCategory, ActionType, EventKind
from dispatch.usage.ledger import UsageLedger
from dispatch.usage.sms import TenantSmsService


@pytest.fixture
def ledger(config_store):
    return UsageLedger(config_store)


@pytest.fixture
def handler(directory, sms_gateway, ledger):
    resolver = TargetResolver(users=directory, customers=directory)
    return SMSActionHandler(resolver, TenantSmsService(sms_gateway, ledger), ledger)


def _event(**overrides):
    defaults = {
        "kind": EventKind.ORDER_FULFILLED,
        "tenant_id": "tenant-1",
        "category": ActionCategory.SYSTEM_NOTIFICATION,
        "payload": {"order_code": "A-7"},
        "target_user_id": "user-1",
    }
    defaults.update(overrides)
    return DispatchEvent(**defaults)


class TestCanHandle:
    def test_applicable_with_user(self, handler):
        assert handler.can_handle(_event()) is True

    def test_not_applicable_without_candidates(self, handler):
        assert handler.can_handle(_event(target_user_id=None)) is False

    def test_applicable_with_payload_phone(self, handler):
        assert handler.can_handle(_event(target_user_id=None, payload={"phone_number": "0712345678"})) is True


class TestExecute:
    def test_sends_rendered_message(self, handler, directory, sms_gateway, ledger):
        directory.add_user("user-1", "+254712345678")

        result = handler.execute("tenant-1", _event(), ActionConfig())

        assert result.success is True
        assert result.action_type is ActionType.SMS
        assert result.metadata["message_id"] == sms_gateway.sent_messages[0]["message_id"]
        assert sms_gateway.sent_messages[0]["to"] == "0712345678"
        assert sms_gateway.sent_messages[0]["body"] == "Order #A-7 has been fulfilled"
        assert ledger.get_kind_count("tenant-1", EventKind.ORDER_FULFILLED) == 1

    def test_limit_reached_blocks_send(self, handler, directory, sms_gateway, ledger):
        directory.add_user("user-1", "0712345678")
        for _ in range(2):
            ledger.track("tenant-1", EventKind.ORDER_FULFILLED, ActionCategory.SYSTEM_NOTIFICATION)

        result = handler.execute("tenant-1", _event(), ActionConfig(limit=2))

        assert result.success is False
        assert result.error == RATE_LIMIT_EXCEEDED
        assert sms_gateway.sent_messages == []

    def test_below_limit_sends(self, handler, directory, sms_gateway):
        directory.add_user("user-1", "0712345678")
        assert handler.execute("tenant-1", _event(), ActionConfig(limit=2)).success is True

    def test_gateway_failure_reported(self, handler, directory, sms_gateway, ledger):
        directory.add_user("user-1", "0712345678")
        sms_gateway.configure(should_succeed=False, failure_reason="Insufficient credit")

        result = handler.execute("tenant-1", _event(), ActionConfig())

        assert result.success is False
        assert result.error == "Insufficient credit"
        assert ledger.get_total_count("tenant-1") == 0

    def test_gateway_exception_never_escapes(self, handler, directory, sms_gateway):
        directory.add_user("user-1", "0712345678")
        sms_gateway.configure(raise_error=TimeoutError("gateway timed out"))

        result = handler.execute("tenant-1", _event(), ActionConfig())

        assert result.success is False
        assert "timed out" in result.error

    def test_unresolvable_target(self, handler, sms_gateway):
        result = handler.execute("tenant-1", _event(target_user_id="ghost"), ActionConfig())
        assert result.success is False
        assert sms_gateway.sent_messages == []

    def test_invalid_payload_phone_skips_lookup(self, handler, directory, sms_gateway):
        directory.add_user("user-1", "0712345678")
        event = _event(payload={"phone_number": "12-ab"})

        result = handler.execute("tenant-1", event, ActionConfig())

        assert result.success is False
        assert directory.lookups == []
        assert sms_gateway.sent_messages == []
