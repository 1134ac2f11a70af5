"""
Ballot Workflow - Phase-gated voting process

An administrator registers eligible voters, opens and closes a
proposal-submission window, opens and closes a voting window, and
finally tallies the votes to determine a winning proposal.

Guarantees:
- Phases advance strictly forward, one step at a time
- One voter, one vote
- Every accepted mutation is announced by exactly one event
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
