"""Infrastructure stubs for development and testing.

Available stubs:
- InMemoryVotingEventLog: Ordered in-memory event log with synchronous observers
"""

from ballot_workflow.infrastructure.stubs.voting_event_log_stub import (
    InMemoryVotingEventLog,
    VotingEventObserver,
)

__all__: list[str] = ["InMemoryVotingEventLog", "VotingEventObserver"]
