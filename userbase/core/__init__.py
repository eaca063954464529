"""Core Layer — entities, value objects, validators and repository contracts.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - No IO: everything here is deterministic given its inputs

Design Decisions:
    - Functional core separated from imperative shell
"""
