"""Infrastructure Layer — database sessions, repositories and logging setup.

Invariants:
    - Every SQLAlchemy failure leaves this layer as a StorefrontError
"""
