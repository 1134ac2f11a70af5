"""
Domain layer - Pure business logic for the voting process.

This layer contains:
- Domain models (WorkflowPhase, Voter, Proposal)
- Domain events (voter registered, proposal registered, voted, status change)
- Domain services (tally)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
Only stdlib and typing imports are allowed.
"""

from ballot_workflow.domain.exceptions import BallotError

__all__: list[str] = ["BallotError"]
