"""API Layer — FastAPI routes, dependency providers, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are raw documents or arrays; errors are JSON with a message

Design Decisions:
    - Thin routes delegate to services
"""
