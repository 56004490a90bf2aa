"""Core Layer: pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Utility operations are pure and deterministic; only the registry holds state

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
