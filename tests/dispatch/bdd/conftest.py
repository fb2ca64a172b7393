"""Shared BDD fixtures and step definitions for dispatch scenarios."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from dispatch.bootstrap import build_dispatch_core
from dispatch.inbox.queries import unread_count
from dispatch.preference.management import SetEventPreference


@pytest.fixture
def core(server_settings, server_role, config_store, directory, audit, reminders, sms_gateway, push_gateway):
    return build_dispatch_core(
        server_settings,
        process_role=server_role,
        config_store=config_store,
        directory=directory,
        audit=audit,
        reminders=reminders,
        sms_gateway=sms_gateway,
        push_gateway=push_gateway,
    )


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('tenant "{tenant_id}" enables sms and in_app for "{kind}"'))
def tenant_enables(config_store, tenant_id, kind):
    config_store.set_event_config(tenant_id, kind, {"sms": {"enabled": True}, "in_app": {"enabled": True}})


@given(parsers.cfparse('customer user "{user_id}" with phone "{phone}"'))
def customer_user(directory, user_id, phone):
    directory.add_user(user_id, phone)


@given(parsers.cfparse('"{user_id}" opted out of "{kind}"'))
def opted_out(user_id, kind):
    current_domain.process(
        SetEventPreference(tenant_id="tenant-1", user_id=user_id, event_kind=kind, enabled=False),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('{count:d} SMS is sent to "{phone}"'))
def sms_sent_to(sms_gateway, count, phone):
    assert [m["to"] for m in sms_gateway.sent_messages] == [phone] * count


@then(parsers.cfparse("{count:d} SMS are sent"))
def sms_count(sms_gateway, count):
    assert len(sms_gateway.sent_messages) == count


@then(parsers.cfparse('"{user_id}" has {count:d} unread notification'))
@then(parsers.cfparse('"{user_id}" has {count:d} unread notifications'))
def unread(user_id, count):
    assert unread_count("tenant-1", user_id) == count
