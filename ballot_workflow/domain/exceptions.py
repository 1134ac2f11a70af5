"""Root of the ballot workflow exception hierarchy."""


class BallotError(Exception):
    """Base class for every refusal raised by the voting process.

    Callers can catch BallotError to handle any rejected operation; the
    subclasses in ballot_workflow.domain.errors say which check failed.
    A failed operation never changes the process state.
    """
