"""Voting event emitter port interface.

This module defines the port through which the voting process announces
accepted state changes to external observers.

Ports define the boundaries between the application layer and infrastructure.

Developer Golden Rules:
1. emit() is called only after the state change is applied
2. emit() is synchronous; observers see events in state-change order
3. Failed operations never emit
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable

from ballot_workflow.domain.events.voting import VotingEventPayload


@dataclass(frozen=True, eq=True)
class RecordedVotingEvent:
    """An emitted event as seen by observers.

    Attributes:
        sequence: Monotonic position in the event log, starting at 1.
        event_type: Type constant of the payload.
        payload: The event payload.
        recorded_at: UTC timestamp when recorded.
    """

    sequence: int
    event_type: str
    payload: VotingEventPayload
    recorded_at: datetime

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "sequence": self.sequence,
            "event_type": self.event_type,
            "payload": self.payload.to_dict(),
            "recorded_at": self.recorded_at.isoformat(),
        }


@runtime_checkable
class VotingEventEmitterProtocol(Protocol):
    """Abstract port interface for voting event emission.

    Infrastructure adapters decide where events go (an in-memory log,
    a message bus, a chain log). The voting process only requires that
    emission is synchronous and preserves call order.
    """

    def emit(self, event_type: str, payload: VotingEventPayload) -> None:
        """Publish one event.

        Args:
            event_type: Event type constant (e.g. "voting.voted").
            payload: Immutable event payload.
        """
        ...
