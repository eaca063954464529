"""Infrastructure Layer — in-memory repositories, repository provider, logging setup.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - Holds all process-lifetime state (repository collections)
"""
