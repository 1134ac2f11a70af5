"""Workflow phase model for the voting process.

The voting process moves through six ordered phases. Each phase is
entered by exactly one owner-triggered operation from its predecessor;
phases are never skipped and never revisited.

State Machine:
    REGISTERING_VOTERS -> PROPOSALS_REGISTRATION_STARTED
    PROPOSALS_REGISTRATION_STARTED -> PROPOSALS_REGISTRATION_ENDED
    PROPOSALS_REGISTRATION_ENDED -> VOTING_SESSION_STARTED
    VOTING_SESSION_STARTED -> VOTING_SESSION_ENDED
    VOTING_SESSION_ENDED -> VOTES_TALLIED

Terminal State:
    VOTES_TALLIED - the process is read-only from here on.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any


class WorkflowPhase(IntEnum):
    """Phase in the voting workflow.

    Integer values are part of the public contract: events carry them
    and callers compare them to order phases.
    """

    REGISTERING_VOTERS = 0
    PROPOSALS_REGISTRATION_STARTED = 1
    PROPOSALS_REGISTRATION_ENDED = 2
    VOTING_SESSION_STARTED = 3
    VOTING_SESSION_ENDED = 4
    VOTES_TALLIED = 5

    @property
    def label(self) -> str:
        """Human-readable CamelCase name of the phase."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    def is_terminal(self) -> bool:
        """Check if no further transition is possible from this phase.

        Returns:
            True for VOTES_TALLIED, False otherwise.
        """
        return self is WorkflowPhase.VOTES_TALLIED

    def next_phase(self) -> WorkflowPhase | None:
        """Get the single phase reachable from this one.

        Returns:
            The successor phase, or None for the terminal phase.
        """
        return PHASE_TRANSITIONS.get(self)


# Each phase has exactly one successor
PHASE_TRANSITIONS: dict[WorkflowPhase, WorkflowPhase] = {
    WorkflowPhase.REGISTERING_VOTERS: WorkflowPhase.PROPOSALS_REGISTRATION_STARTED,
    WorkflowPhase.PROPOSALS_REGISTRATION_STARTED: WorkflowPhase.PROPOSALS_REGISTRATION_ENDED,
    WorkflowPhase.PROPOSALS_REGISTRATION_ENDED: WorkflowPhase.VOTING_SESSION_STARTED,
    WorkflowPhase.VOTING_SESSION_STARTED: WorkflowPhase.VOTING_SESSION_ENDED,
    WorkflowPhase.VOTING_SESSION_ENDED: WorkflowPhase.VOTES_TALLIED,
}


def is_valid_transition(from_phase: WorkflowPhase, to_phase: WorkflowPhase) -> bool:
    """Check if a transition is valid.

    Args:
        from_phase: Current phase.
        to_phase: Proposed next phase.

    Returns:
        True if to_phase is the direct successor of from_phase.
    """
    return PHASE_TRANSITIONS.get(from_phase) is to_phase


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class WorkflowTransition:
    """Record of an applied phase transition.

    Immutable to ensure transition integrity.
    """

    previous_phase: WorkflowPhase
    new_phase: WorkflowPhase
    triggered_by: str
    transitioned_at: datetime

    def __post_init__(self) -> None:
        """Reject records of transitions the workflow does not allow."""
        if not is_valid_transition(self.previous_phase, self.new_phase):
            raise ValueError(
                f"Invalid workflow transition: "
                f"{self.previous_phase.label} -> {self.new_phase.label}"
            )

    @classmethod
    def create(
        cls,
        previous_phase: WorkflowPhase,
        new_phase: WorkflowPhase,
        triggered_by: str,
        timestamp: datetime | None = None,
    ) -> WorkflowTransition:
        """Create a transition record, stamping it with the current time by default."""
        return cls(
            previous_phase=previous_phase,
            new_phase=new_phase,
            triggered_by=triggered_by,
            transitioned_at=timestamp or _utc_now(),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "previous_phase": int(self.previous_phase),
            "new_phase": int(self.new_phase),
            "triggered_by": self.triggered_by,
            "transitioned_at": self.transitioned_at.isoformat(),
        }
