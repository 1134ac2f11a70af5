"""Application services - use cases of the voting process."""

from ballot_workflow.application.services.voting_process_service import (
    GENESIS_PROPOSAL_ID,
    VotingProcessService,
)

__all__: list[str] = ["GENESIS_PROPOSAL_ID", "VotingProcessService"]
