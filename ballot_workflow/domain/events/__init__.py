"""
Domain events for the voting process.

Events are immutable payloads announcing accepted state changes.
"""

from ballot_workflow.domain.events.voting import (
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTED_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    WORKFLOW_STATUS_CHANGE_EVENT_TYPE,
    ProposalRegisteredPayload,
    VotedPayload,
    VoterRegisteredPayload,
    VotingEventPayload,
    WorkflowStatusChangePayload,
)

__all__: list[str] = [
    "PROPOSAL_REGISTERED_EVENT_TYPE",
    "VOTED_EVENT_TYPE",
    "VOTER_REGISTERED_EVENT_TYPE",
    "WORKFLOW_STATUS_CHANGE_EVENT_TYPE",
    "ProposalRegisteredPayload",
    "VotedPayload",
    "VoterRegisteredPayload",
    "VotingEventPayload",
    "WorkflowStatusChangePayload",
]
