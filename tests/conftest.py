import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the protean config overlay before any domain is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def _isolated_dispatch_env(monkeypatch):
    """Keep a process role exported in the shell from leaking into tests."""
    for name in (
        "DISPATCH_PROCESS_ROLE",
        "DISPATCH_TRANSITION_HISTORY_SIZE",
        "DISPATCH_REMINDER_COOLDOWN_HOURS",
        "DISPATCH_SMS_ADAPTER",
        "DISPATCH_PUSH_ADAPTER",
    ):
        monkeypatch.delenv(name, raising=False)
