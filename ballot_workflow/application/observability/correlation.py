"""Correlation IDs for voting process calls.

A caller that wants to tie several operations together (for example one
request that registers a voter and reads the record back) runs them inside
a correlation_scope(); every log entry written in the block carries the
same correlation_id.

Usage:
    with correlation_scope(request_id) as correlation_id:
        process.add_voter(owner, voter)
        process.get_voter(voter, voter)

    # In structlog configuration
    processors = [..., correlation_id_processor, ...]
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Any
from uuid import uuid4

# "" means no scope is active
_correlation_id: ContextVar[str] = ContextVar("ballot_correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4 string)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the correlation ID of the current context, or "" if none is set."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> Token[str]:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The ID to attach to subsequent log entries.

    Returns:
        Token that restores the previous value via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id)


def reset_correlation_id(token: Token[str]) -> None:
    """Restore the correlation ID that was current before set_correlation_id()."""
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Run a block under one correlation ID.

    The previous ID is restored on exit, so scopes nest.

    Args:
        correlation_id: ID to use; a fresh one is generated when omitted or empty.

    Yields:
        The correlation ID in effect inside the block.
    """
    token = set_correlation_id(correlation_id or generate_correlation_id())
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding the context's correlation_id.

    Entries that already bind a correlation_id keep it.
    """
    if "correlation_id" not in event_dict:
        correlation_id = get_correlation_id()
        if correlation_id:
            event_dict["correlation_id"] = correlation_id
    return event_dict
