"""Application layer - Use cases orchestrating the domain.

Imports from the domain layer only; infrastructure is reached through ports.
"""
