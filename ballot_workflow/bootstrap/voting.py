"""Bootstrap wiring for voting process dependencies."""

from __future__ import annotations

from ballot_workflow.application.ports.voting_event_emitter import (
    VotingEventEmitterProtocol,
)
from ballot_workflow.application.services.voting_process_service import (
    VotingProcessService,
)
from ballot_workflow.infrastructure.stubs.voting_event_log_stub import (
    InMemoryVotingEventLog,
)


def create_voting_process(
    owner: str,
    event_emitter: VotingEventEmitterProtocol | None = None,
) -> VotingProcessService:
    """Create a voting process owned by owner.

    Args:
        owner: Identity allowed to run owner-only operations.
        event_emitter: Event channel; an InMemoryVotingEventLog when omitted.

    Returns:
        A VotingProcessService in the REGISTERING_VOTERS phase.
    """
    if event_emitter is None:
        event_emitter = InMemoryVotingEventLog()
    return VotingProcessService(owner=owner, event_emitter=event_emitter)


__all__ = ["create_voting_process"]
