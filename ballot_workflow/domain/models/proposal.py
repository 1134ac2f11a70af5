"""Proposal record for the voting process.

Proposals live in an append-only sequence addressed by 0-based index.
Index 0 is always the GENESIS sentinel, appended when proposal
registration opens.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

GENESIS_DESCRIPTION: str = "GENESIS"


@dataclass(frozen=True, eq=True)
class Proposal:
    """A proposal and the votes it has received.

    Attributes:
        description: Proposal text. Never empty.
        vote_count: Number of accepted votes, starting at 0.
    """

    description: str
    vote_count: int = 0

    def __post_init__(self) -> None:
        """Validate proposal fields."""
        if self.description == "":
            raise ValueError("Proposal description must not be empty")
        if self.vote_count < 0:
            raise ValueError(f"vote_count must be non-negative, got {self.vote_count}")

    def with_vote(self) -> Proposal:
        """Return this proposal with one more vote."""
        return replace(self, vote_count=self.vote_count + 1)


def genesis_proposal() -> Proposal:
    """Create the sentinel proposal stored at index 0."""
    return Proposal(description=GENESIS_DESCRIPTION)
