"""Domain services - stateless business rules over domain models."""

from ballot_workflow.domain.services.tally import select_winning_proposal

__all__: list[str] = ["select_winning_proposal"]
