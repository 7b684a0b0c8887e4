"""Infrastructure Layer — cross-cutting concerns.

Invariants:
    - Infrastructure depends on core/ types only, never on services/ or api/

Design Decisions:
    - Logging setup and invocation records kept out of handlers
"""
