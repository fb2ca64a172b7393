"""BDD tests for tenant approval notifications."""

from pytest_bdd import given, parsers, scenarios, when

from dispatch.transitions import TenantStatusObservation

scenarios("features/tenant_approval.feature")


@given(parsers.cfparse('tenant "{tenant_id}" named "{company}" is now "{status}"'))
def tenant_status(directory, tenant_id, company, status):
    directory.set_tenant(tenant_id, status, company_name=company)


@given(parsers.cfparse('administrator "{user_id}" named "{name}" with phone "{phone}"'))
def administrator(directory, user_id, name, phone):
    directory.add_admin("tenant-1", user_id, name=name, login=phone)


@when(parsers.cfparse('the status change from "{old}" to "{new}" is observed {times:d} times'))
def observe_change(core, old, new, times):
    for _ in range(times):
        core.detector.observe(
            TenantStatusObservation(tenant_id="tenant-1", changes={"status": new}, snapshot_status=old)
        )


@when("a change without a status is observed")
def observe_without_status(core):
    core.detector.observe(
        TenantStatusObservation(tenant_id="tenant-1", changes={"company_name": "Acme"}, snapshot_status="pending")
    )
