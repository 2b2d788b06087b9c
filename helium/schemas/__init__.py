"""Pydantic Schemas — document shapes validated at the write boundary.

Invariants:
    - Schemas validate user input before any upsert reaches the store
    - The "type" field of each schema is pinned to its ResourceType value
"""
