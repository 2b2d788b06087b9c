"""Core Layer — pure domain logic, no IO, no async, no store clients.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Query building and validation are deterministic functions of their inputs
"""
