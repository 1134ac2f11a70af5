"""Voting process event payloads.

Every successful mutating operation emits exactly one of these payloads,
in the same order as the state changes they describe. They are the only
progress signal available to callers that are not the owner.

Event types follow lowercase.dot.notation:
- voting.voter_registered
- voting.proposal_registered
- voting.voted
- voting.workflow_status_change
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ballot_workflow.domain.models.workflow_phase import WorkflowPhase

VOTER_REGISTERED_EVENT_TYPE: str = "voting.voter_registered"
PROPOSAL_REGISTERED_EVENT_TYPE: str = "voting.proposal_registered"
VOTED_EVENT_TYPE: str = "voting.voted"
WORKFLOW_STATUS_CHANGE_EVENT_TYPE: str = "voting.workflow_status_change"


@dataclass(frozen=True, eq=True)
class VoterRegisteredPayload:
    """Payload for a voter added by the owner.

    Attributes:
        voter_address: Identity that became a registered voter.
    """

    voter_address: str

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for event serialization."""
        return {"voter_address": self.voter_address}


@dataclass(frozen=True, eq=True)
class ProposalRegisteredPayload:
    """Payload for a proposal appended by a voter.

    Attributes:
        proposal_id: Index of the new proposal.
    """

    proposal_id: int

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for event serialization."""
        return {"proposal_id": self.proposal_id}


@dataclass(frozen=True, eq=True)
class VotedPayload:
    """Payload for an accepted vote.

    Votes are attributable: the voter identity is part of the event.

    Attributes:
        voter: Identity that voted.
        proposal_id: Index of the proposal voted for.
    """

    voter: str
    proposal_id: int

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for event serialization."""
        return {"voter": self.voter, "proposal_id": self.proposal_id}


@dataclass(frozen=True, eq=True)
class WorkflowStatusChangePayload:
    """Payload for a workflow phase transition.

    Attributes:
        previous_status: Phase before the transition.
        new_status: Phase after the transition.
    """

    previous_status: WorkflowPhase
    new_status: WorkflowPhase

    def __post_init__(self) -> None:
        """Validate that the change is a single forward step."""
        if int(self.new_status) != int(self.previous_status) + 1:
            raise ValueError(
                f"Workflow status must advance by exactly one step, got "
                f"{int(self.previous_status)} -> {int(self.new_status)}"
            )

    def to_dict(self) -> dict[str, object]:
        """Convert payload to dictionary for event serialization."""
        return {
            "previous_status": int(self.previous_status),
            "new_status": int(self.new_status),
        }


VotingEventPayload = Union[
    VoterRegisteredPayload,
    ProposalRegisteredPayload,
    VotedPayload,
    WorkflowStatusChangePayload,
]
