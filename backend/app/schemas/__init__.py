"""Pydantic Schemas — response bodies at the API boundary.

Invariants:
    - Schemas shape what leaves the service; wire keys are camelCase
    - Constants from core/ pin the fixed fields
"""
