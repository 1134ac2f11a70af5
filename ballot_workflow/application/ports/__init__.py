"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- VotingEventEmitterProtocol: Synchronous publication of voting events
"""

from ballot_workflow.application.ports.voting_event_emitter import (
    RecordedVotingEvent,
    VotingEventEmitterProtocol,
)

__all__: list[str] = ["RecordedVotingEvent", "VotingEventEmitterProtocol"]
