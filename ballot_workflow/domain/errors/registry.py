"""Voter and proposal registry errors for the voting process."""

from __future__ import annotations

from ballot_workflow.domain.exceptions import BallotError


class AlreadyRegisteredError(BallotError):
    """Raised when the owner adds an identity that is already a voter.

    Attributes:
        voter_address: The identity already registered.
    """

    def __init__(self, voter_address: str) -> None:
        self.voter_address = voter_address
        super().__init__(f"Voter {voter_address} is already registered")


class AlreadyVotedError(BallotError):
    """Raised when a voter tries to vote a second time.

    Attributes:
        voter_address: The voter that already voted.
        voted_proposal_id: Proposal the original vote went to.
    """

    def __init__(self, voter_address: str, voted_proposal_id: int) -> None:
        self.voter_address = voter_address
        self.voted_proposal_id = voted_proposal_id
        super().__init__(
            f"Voter {voter_address} has already voted "
            f"(for proposal {voted_proposal_id})"
        )


class EmptyInputError(BallotError):
    """Raised when a required text input is empty.

    Attributes:
        field_name: Name of the empty input.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name} must not be empty")


class NotFoundError(BallotError):
    """Base class for lookups that reference a missing record."""


class ProposalNotFoundError(NotFoundError):
    """Raised when a proposal index is outside the registry's bounds.

    Attributes:
        proposal_id: The requested index.
        proposal_count: Number of proposals at the time of the request.
    """

    def __init__(
        self,
        proposal_id: int,
        proposal_count: int,
    ) -> None:
        self.proposal_id = proposal_id
        self.proposal_count = proposal_count
        if proposal_count:
            detail = f"valid indices are 0..{proposal_count - 1}"
        else:
            detail = "no proposals are registered"
        super().__init__(f"Proposal {proposal_id} not found: {detail}")


class GenesisNotVotableError(BallotError):
    """Raised when a vote targets the GENESIS sentinel at index 0.

    The sentinel exists and can be read; it never accepts a ballot.

    Attributes:
        proposal_id: The requested index.
    """

    def __init__(self, proposal_id: int) -> None:
        self.proposal_id = proposal_id
        super().__init__(
            f"Proposal {proposal_id} is the GENESIS sentinel and does not accept votes"
        )
