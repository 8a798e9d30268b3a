"""Core Layer — domain types, error hierarchy, persistence contracts.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
    - All functions are pure and deterministic
"""
