"""Domain models for the voting process."""

from ballot_workflow.domain.models.proposal import (
    GENESIS_DESCRIPTION,
    Proposal,
    genesis_proposal,
)
from ballot_workflow.domain.models.voter import UNREGISTERED_VOTER, Voter
from ballot_workflow.domain.models.workflow_phase import (
    PHASE_TRANSITIONS,
    WorkflowPhase,
    WorkflowTransition,
    is_valid_transition,
)

__all__: list[str] = [
    "GENESIS_DESCRIPTION",
    "PHASE_TRANSITIONS",
    "Proposal",
    "UNREGISTERED_VOTER",
    "Voter",
    "WorkflowPhase",
    "WorkflowTransition",
    "genesis_proposal",
    "is_valid_transition",
]
