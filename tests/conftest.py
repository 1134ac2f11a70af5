"""
Pytest configuration and shared fixtures for ballot workflow tests.

Testing Standards:
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- Prefer the in-memory stubs over mocks for the event channel
"""

import pytest
import structlog

from ballot_workflow.application.services.voting_process_service import (
    VotingProcessService,
)
from ballot_workflow.infrastructure.stubs.voting_event_log_stub import (
    InMemoryVotingEventLog,
)
from tests.helpers.voting_process import OWNER


@pytest.fixture(autouse=True)
def reset_structlog() -> None:
    """Give each test a fresh, unconfigured structlog."""
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from ballot_workflow import __version__

    return __version__


@pytest.fixture
def owner() -> str:
    """Identity that creates and administers the process."""
    return OWNER


@pytest.fixture
def event_log() -> InMemoryVotingEventLog:
    """Create an empty in-memory event log."""
    return InMemoryVotingEventLog()


@pytest.fixture
def process(event_log: InMemoryVotingEventLog) -> VotingProcessService:
    """Create a fresh voting process owned by OWNER."""
    return VotingProcessService(owner=OWNER, event_emitter=event_log)
