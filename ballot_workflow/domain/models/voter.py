"""Voter record for the voting process.

One record per identity. Identities never added by the owner read as
UNREGISTERED_VOTER rather than failing the lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, eq=True)
class Voter:
    """Registration and ballot state of a single identity.

    Attributes:
        is_registered: True once the owner adds this identity.
        has_voted: True once this identity casts a vote. Never reset.
        voted_proposal_id: Proposal index voted for. Meaningful only
            when has_voted is True.
    """

    is_registered: bool = False
    has_voted: bool = False
    voted_proposal_id: int = 0

    def registered(self) -> Voter:
        """Return the registered form of this record."""
        return replace(self, is_registered=True)

    def with_vote(self, proposal_id: int) -> Voter:
        """Return this record with a cast vote.

        A record never holds more than one ballot, independent of the
        checks callers run first.

        Args:
            proposal_id: Index of the proposal voted for.

        Returns:
            New Voter with has_voted set and voted_proposal_id fixed.

        Raises:
            ValueError: If this voter has already voted.
        """
        if self.has_voted:
            raise ValueError("Voter has already voted; a ballot cannot be changed")
        return replace(self, has_voted=True, voted_proposal_id=proposal_id)


UNREGISTERED_VOTER = Voter()
