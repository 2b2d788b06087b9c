"""Helium API Package — REST facade over the movie catalog document store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
