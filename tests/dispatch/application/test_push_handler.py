"""Tests for the push delivery handler."""

import pytest

from dispatch.event import ActionConfig, DispatchEvent
from dispatch.handlers.push import PushActionHandler
from dispatch.taxonomy import ActionCategory, ActionType, EventKind


@pytest.fixture
def handler(push_gateway, directory):
    return PushActionHandler(push_gateway, directory)


def _event(**overrides):
    defaults = {
        "kind": EventKind.SUBSCRIPTION_RENEWED,
        "tenant_id": "tenant-1",
        "category": ActionCategory.SYSTEM_NOTIFICATION,
        "target_user_id": "admin-1",
    }
    defaults.update(overrides)
    return DispatchEvent(**defaults)


class TestPushHandler:
    def test_requires_target_user(self, handler):
        assert handler.can_handle(_event()) is True
        assert handler.can_handle(_event(target_user_id=None)) is False

    def test_sends_to_every_subscription(self, handler, directory, push_gateway):
        directory.add_push_subscription("tenant-1", "admin-1", "https://push/a")
        directory.add_push_subscription("tenant-1", "admin-1", "https://push/b")

        result = handler.execute("tenant-1", _event(), ActionConfig())

        assert result.success is True
        assert result.action_type is ActionType.PUSH
        assert len(result.metadata["message_ids"]) == 2
        assert {p["endpoint"] for p in push_gateway.sent_pushes} == {"https://push/a", "https://push/b"}
        assert push_gateway.sent_pushes[0]["data"]["kind"] == "subscription.renewed"

    def test_no_subscriptions_is_failure(self, handler):
        result = handler.execute("tenant-1", _event(), ActionConfig())
        assert result.success is False
        assert result.error == "No push subscriptions for user"

    def test_partial_failure_still_succeeds(self, handler, directory, push_gateway):
        directory.add_push_subscription("tenant-1", "admin-1", "https://push/stale")
        directory.add_push_subscription("tenant-1", "admin-1", "https://push/live")
        push_gateway.expire("https://push/stale")

        result = handler.execute("tenant-1", _event(), ActionConfig())

        assert result.success is True
        assert result.metadata["failed"] == 1

    def test_all_sends_failing(self, handler, directory, push_gateway):
        directory.add_push_subscription("tenant-1", "admin-1", "https://push/a")
        push_gateway.configure(should_succeed=False, failure_reason="Gone")

        result = handler.execute("tenant-1", _event(), ActionConfig())

        assert result.success is False
        assert result.error == "Gone"
