"""Services Layer — per-resource orchestration between routes and the document store.

Invariants:
    - Services receive their collaborators through the constructor (store, telemetry, config)
    - Services raise HeliumError subclasses only; store errors never escape
"""
