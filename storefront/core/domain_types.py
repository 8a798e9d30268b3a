"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, StoreId, ProductId wrap integer primary keys
    - Constraint kinds and runtime environments are Enums, never raw strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
StoreId = NewType("StoreId", int)
ProductId = NewType("ProductId", int)

# Integer primary keys are 32-bit signed in PostgreSQL
MAX_ID = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ConstraintKind(str, Enum):
    """Integrity constraint classes reported by the database driver."""
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    UNKNOWN = "unknown"


class Environment(str, Enum):
    """Runtime mode — production hides error detail from clients."""
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"
