"""Domain errors for the voting process.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from BallotError.
"""

from ballot_workflow.domain.errors.authorization import (
    AuthorizationError,
    NotOwnerError,
    NotVoterError,
)
from ballot_workflow.domain.errors.registry import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    EmptyInputError,
    GenesisNotVotableError,
    NotFoundError,
    ProposalNotFoundError,
)
from ballot_workflow.domain.errors.workflow import PhaseError

__all__: list[str] = [
    "AlreadyRegisteredError",
    "AlreadyVotedError",
    "AuthorizationError",
    "EmptyInputError",
    "GenesisNotVotableError",
    "NotFoundError",
    "NotOwnerError",
    "NotVoterError",
    "PhaseError",
    "ProposalNotFoundError",
]
