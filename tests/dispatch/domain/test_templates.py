"""Tests for message templates."""

import pytest

from dispatch.taxonomy import EventKind
from dispatch.templates import TEMPLATE_REGISTRY, get_template, render_message
from dispatch.templates.generic import GenericTemplate
from dispatch.templates.order_update import OrderUpdateTemplate


class TestTemplateRegistry:
    @pytest.mark.parametrize("kind", list(EventKind))
    def test_every_kind_renders_title_and_body(self, kind):
        rendered = render_message(kind, {})
        assert rendered["title"]
        assert rendered["body"]

    def test_order_kinds_use_order_template(self):
        assert get_template(EventKind.ORDER_CANCELLED) is OrderUpdateTemplate

    def test_unregistered_kind_falls_back_to_generic(self):
        assert get_template("no.such_kind") is GenericTemplate

    def test_registry_keys_are_event_kinds(self):
        assert all(isinstance(kind, EventKind) for kind in TEMPLATE_REGISTRY)


class TestRenderedText:
    def test_order_code_in_body(self):
        rendered = render_message(EventKind.ORDER_PAYMENT_SETTLED, {"order_code": "A-100"})
        assert rendered["body"] == "Order #A-100 payment has been settled"

    def test_missing_order_code(self):
        rendered = render_message(EventKind.ORDER_FULFILLED)
        assert rendered["body"] == "Order #N/A has been fulfilled"

    def test_tenant_approved(self):
        rendered = render_message(
            EventKind.TENANT_APPROVED,
            {"admin_name": "Jane", "company_name": "Acme Ltd"},
        )
        assert rendered["body"] == "Hi Jane! Acme Ltd has been approved. Welcome aboard!"

    def test_expiring_soon_days(self):
        rendered = render_message(EventKind.SUBSCRIPTION_EXPIRING_SOON, {"days_remaining": 3})
        assert "3 days" in rendered["body"]

    def test_generic_fallback_text(self):
        assert GenericTemplate.render("custom.kind", {})["body"] == "Notification: custom.kind"
