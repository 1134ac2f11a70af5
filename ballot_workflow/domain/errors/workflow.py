"""Workflow phase errors for the voting process.

A PhaseError is a precondition failure, not a fatal one: the caller may
wait for the workflow to reach the expected phase and try again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ballot_workflow.domain.exceptions import BallotError

if TYPE_CHECKING:
    from ballot_workflow.domain.models.workflow_phase import WorkflowPhase


class PhaseError(BallotError):
    """Raised when an operation is invoked outside its required phase.

    Attributes:
        operation: Name of the rejected operation.
        expected_phase: Phase the operation requires.
        current_phase: Phase the process is actually in.
    """

    def __init__(
        self,
        operation: str,
        expected_phase: WorkflowPhase,
        current_phase: WorkflowPhase,
    ) -> None:
        """Initialize phase error.

        Args:
            operation: Name of the rejected operation.
            expected_phase: Phase the operation requires.
            current_phase: Phase the process is actually in.
        """
        self.operation = operation
        self.expected_phase = expected_phase
        self.current_phase = current_phase
        super().__init__(
            f"{operation} requires phase {expected_phase.label} "
            f"({int(expected_phase)}), current phase is "
            f"{current_phase.label} ({int(current_phase)})"
        )
