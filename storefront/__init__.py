"""Storefront API Package — CRUD service for users, stores and products.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
