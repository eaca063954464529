"""Userbase Application Package — users CRUD backend over searchable in-memory repositories.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
