"""Authorization errors for the voting process.

Two capability checks guard every operation: the fixed owner identity for
workflow and registry administration, and registered-voter membership for
proposal submission, voting and reads.
"""

from ballot_workflow.domain.exceptions import BallotError


class AuthorizationError(BallotError):
    """Raised when the caller lacks the capability an operation requires.

    Attributes:
        caller: Identity that attempted the operation.
    """

    def __init__(self, caller: str, message: str) -> None:
        """Initialize authorization error.

        Args:
            caller: Identity that attempted the operation.
            message: Human-readable error description.
        """
        self.caller = caller
        super().__init__(message)


class NotOwnerError(AuthorizationError):
    """Raised when a non-owner calls an owner-only operation."""

    def __init__(self, caller: str) -> None:
        """Initialize not-owner error.

        Args:
            caller: Identity that is not the owner.
        """
        super().__init__(caller, f"Caller {caller} is not the owner")


class NotVoterError(AuthorizationError):
    """Raised when a caller that is not a registered voter calls a voter-only operation."""

    def __init__(self, caller: str) -> None:
        """Initialize not-voter error.

        Args:
            caller: Identity that is not a registered voter.
        """
        super().__init__(caller, f"Caller {caller} is not a registered voter")
