"""Test helpers for ballot workflow tests."""

from tests.helpers.voting_process import (
    ALICE,
    BOB,
    DEFAULT_PROPOSALS,
    MALLORY,
    OWNER,
    advance_to_phase,
)

__all__ = ["ALICE", "BOB", "DEFAULT_PROPOSALS", "MALLORY", "OWNER", "advance_to_phase"]
