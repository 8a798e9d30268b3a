"""ORM Models — SQLAlchemy declarative models for users, stores and products.

Invariants:
    - All models inherit from Base (db/base.py)
    - User owns Stores, Store owns Products; both FKs cascade on delete

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from storefront.models.user import User  # noqa: F401
from storefront.models.store import Store  # noqa: F401
from storefront.models.product import Product  # noqa: F401
