"""Unit tests for the Voter and Proposal domain models."""

from dataclasses import FrozenInstanceError

import pytest

from ballot_workflow.domain.models.proposal import (
    GENESIS_DESCRIPTION,
    Proposal,
    genesis_proposal,
)
from ballot_workflow.domain.models.voter import UNREGISTERED_VOTER, Voter


class TestVoter:
    """Tests for the Voter record."""

    def test_unregistered_voter_is_all_false_and_zero(self) -> None:
        """The default record reads as never added, never voted."""
        assert UNREGISTERED_VOTER == Voter(
            is_registered=False, has_voted=False, voted_proposal_id=0
        )

    def test_registered_returns_new_instance(self) -> None:
        """registered() does not mutate the shared default record."""
        voter = UNREGISTERED_VOTER.registered()
        assert voter.is_registered
        assert not UNREGISTERED_VOTER.is_registered

    def test_with_vote_sets_ballot(self) -> None:
        """Casting a vote records the proposal."""
        voter = Voter(is_registered=True).with_vote(2)
        assert voter.has_voted
        assert voter.voted_proposal_id == 2
        assert voter.is_registered

    def test_with_vote_twice_rejected(self) -> None:
        """The record itself refuses a second ballot.

        has_voted flips false to true at most once, whatever code path
        builds the record; the service reports AlreadyVotedError before
        reaching this point.
        """
        voter = Voter(is_registered=True).with_vote(1)
        with pytest.raises(ValueError, match="already voted"):
            voter.with_vote(3)
        assert voter.voted_proposal_id == 1

    def test_voter_is_frozen(self) -> None:
        """Voter records cannot be edited in place."""
        voter = Voter(is_registered=True)
        with pytest.raises(FrozenInstanceError):
            voter.has_voted = True  # type: ignore[misc]


class TestProposal:
    """Tests for the Proposal record."""

    def test_new_proposal_has_zero_votes(self) -> None:
        """Proposals start with no votes."""
        assert Proposal(description="p1").vote_count == 0

    def test_with_vote_increments_by_one(self) -> None:
        """Each vote adds exactly one."""
        proposal = Proposal(description="p1").with_vote().with_vote()
        assert proposal.vote_count == 2
        assert proposal.description == "p1"

    def test_empty_description_rejected(self) -> None:
        """The empty string is not a valid description."""
        with pytest.raises(ValueError, match="must not be empty"):
            Proposal(description="")

    def test_whitespace_description_accepted(self) -> None:
        """Only the empty string is rejected."""
        assert Proposal(description="   ").description == "   "

    def test_negative_vote_count_rejected(self) -> None:
        """Vote counts are non-negative."""
        with pytest.raises(ValueError, match="non-negative"):
            Proposal(description="p1", vote_count=-1)

    def test_genesis_proposal(self) -> None:
        """The sentinel is GENESIS with zero votes."""
        genesis = genesis_proposal()
        assert genesis.description == GENESIS_DESCRIPTION == "GENESIS"
        assert genesis.vote_count == 0
