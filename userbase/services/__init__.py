"""Services Layer — user use cases (signup, search, update, delete).

Invariants:
    - Services depend on repository Protocols, never on a concrete store
"""
