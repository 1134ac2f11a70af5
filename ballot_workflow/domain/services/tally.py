"""Winner selection for the voting process.

A single forward pass over the proposals in index order, tracking the
best (index, vote_count) seen so far. Only a strictly greater count
replaces the running winner, so ties go to the lowest index.

The GENESIS sentinel at index 0 takes part in the scan. It never
receives votes, so it only wins when every proposal has zero votes.
"""

from __future__ import annotations

from collections.abc import Sequence

from ballot_workflow.domain.models.proposal import Proposal


def select_winning_proposal(proposals: Sequence[Proposal]) -> int:
    """Return the index of the winning proposal.

    Args:
        proposals: Full proposal sequence, sentinel included.

    Returns:
        Index of the first proposal holding the highest vote count,
        or 0 for an empty sequence.
    """
    winning_id = 0
    winning_count = 0
    for proposal_id, proposal in enumerate(proposals):
        if proposal.vote_count > winning_count:
            winning_id = proposal_id
            winning_count = proposal.vote_count
    return winning_id
