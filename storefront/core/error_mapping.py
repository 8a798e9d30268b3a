"""Database Error Mapping — translates SQLAlchemy failures into tagged domain errors.

Invariants:
    - map_database_error is pure: same exception in, same error class out
    - Driver SQLSTATE wins over message parsing (PostgreSQL/asyncpg, psycopg)
    - SQLite constraint messages are the fallback when no SQLSTATE is present
    - Anything unclassified becomes DatabaseError (500) carrying the raw message as detail

Design Decisions:
    - Called only from the repository layer; route handlers never inspect driver errors
"""

import re

from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError

from storefront.core.domain_types import ConstraintKind
from storefront.core.errors import (
    DatabaseError,
    ErrorContext,
    ForeignKeyViolationError,
    InvalidInputError,
    ResourceNotFoundError,
    StorefrontError,
    UniqueConstraintError,
)

_SQLSTATE_KINDS = {
    "23505": ConstraintKind.UNIQUE,
    "23503": ConstraintKind.FOREIGN_KEY,
    "23502": ConstraintKind.NOT_NULL,
}

# PostgreSQL: Key (email)=(a@a.com) already exists.
_PG_KEY_RE = re.compile(r"Key \(([^)]+)\)=")
# SQLite: UNIQUE constraint failed: users.email, users.name
_SQLITE_UNIQUE_RE = re.compile(r"UNIQUE constraint failed: (.+)$", re.MULTILINE)


def _sqlstate(orig: BaseException | None) -> str | None:
    if orig is None:
        return None
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify_integrity_error(exc: IntegrityError) -> ConstraintKind:
    """Identify which constraint an IntegrityError violated."""
    kind = _SQLSTATE_KINDS.get(_sqlstate(exc.orig) or "")
    if kind:
        return kind
    message = str(exc.orig)
    if "UNIQUE constraint failed" in message:
        return ConstraintKind.UNIQUE
    if "FOREIGN KEY constraint failed" in message:
        return ConstraintKind.FOREIGN_KEY
    if "NOT NULL constraint failed" in message:
        return ConstraintKind.NOT_NULL
    return ConstraintKind.UNKNOWN


def conflicting_fields(exc: IntegrityError) -> list[str]:
    """Column names named by a unique violation, in the order reported."""
    message = str(exc.orig)
    match = _PG_KEY_RE.search(message)
    if match:
        return [name.strip() for name in match.group(1).split(",")]
    match = _SQLITE_UNIQUE_RE.search(message)
    if match:
        return [
            qualified.strip().rsplit(".", 1)[-1]
            for qualified in match.group(1).split(",")
        ]
    return []


def map_database_error(
    exc: SQLAlchemyError, resource: str, operation: str = "operation",
) -> StorefrontError:
    """Map a SQLAlchemy error raised while touching `resource` to a domain error."""
    context = ErrorContext(resource=resource, detail=str(getattr(exc, "orig", None) or exc))
    if isinstance(exc, NoResultFound):
        return ResourceNotFoundError(resource, context=context)
    if isinstance(exc, IntegrityError):
        kind = classify_integrity_error(exc)
        if kind is ConstraintKind.UNIQUE:
            return UniqueConstraintError(resource, conflicting_fields(exc), context)
        if kind is ConstraintKind.FOREIGN_KEY:
            return ForeignKeyViolationError(resource, context)
        if kind is ConstraintKind.NOT_NULL:
            return InvalidInputError(f"{resource} is missing a required field", context)
    return DatabaseError(operation, context)
