import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture

from dispatch.channel.fake_push import FakePushAdapter
from dispatch.channel.fake_sms import FakeSMSAdapter
from dispatch.config import ProcessRoleName, Settings
from dispatch.event import ActionResult
from dispatch.handlers.base import ActionHandler
from dispatch.ports.fake_audit import FakeAuditSink
from dispatch.ports.fake_directory import FakeTenantDirectory
from dispatch.ports.fake_reminder import FakeReminderTracker
from dispatch.ports.fake_tenant_config import FakeTenantConfigStore
from dispatch.ports.process_role import ProcessRole
from dispatch.taxonomy import ActionType


@pytest.fixture(scope="session")
def dispatch_bed():
    from dispatch.domain import dispatch

    bed = DomainFixture(dispatch)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(dispatch_bed):
    with dispatch_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------
@pytest.fixture
def directory():
    return FakeTenantDirectory()


@pytest.fixture
def config_store():
    return FakeTenantConfigStore({"tenant-1": {}})


@pytest.fixture
def audit():
    return FakeAuditSink()


@pytest.fixture
def sms_gateway():
    return FakeSMSAdapter()


@pytest.fixture
def push_gateway():
    return FakePushAdapter()


@pytest.fixture
def reminders():
    return FakeReminderTracker()


@pytest.fixture
def server_role():
    return ProcessRole(ProcessRoleName.SERVER)


@pytest.fixture
def worker_role():
    return ProcessRole(ProcessRoleName.WORKER)


@pytest.fixture
def server_settings():
    return Settings(process_role="server")


# ---------------------------------------------------------------------------
# Recording handlers
# ---------------------------------------------------------------------------
class RecordingHandler(ActionHandler):
    """Handler double that records every invocation."""

    def __init__(self, action_type, applicable=True, succeed=True):
        self.action_type = action_type
        self.applicable = applicable
        self.succeed = succeed
        self.calls = []

    def can_handle(self, event):
        return self.applicable

    def execute(self, tenant_id, event, config):
        self.calls.append((tenant_id, event, config))
        if not self.succeed:
            return ActionResult.failed(self.action_type, "recorded failure")
        return ActionResult(success=True, action_type=self.action_type)


@pytest.fixture
def recording_handlers():
    return {action_type: RecordingHandler(action_type) for action_type in ActionType}


@pytest.fixture
def handler_calls(recording_handlers):
    """Total handler invocations across all recording handlers."""
    return lambda: sum(len(h.calls) for h in recording_handlers.values())
