"""Repository Base — session handling and error translation shared by all repositories."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.error_mapping import map_database_error

logger = logging.getLogger(__name__)


class SqlRepository:
    """Wraps an AsyncSession; every IO call goes through _run or _commit."""

    resource: str = "Resource"

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _run(self, statement, operation: str = "query") -> Any:
        """Execute a statement, translating driver failures."""
        try:
            return await self.db.execute(statement)
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise self._translate(exc, operation) from exc

    async def _get(self, model, ident: int, operation: str = "query") -> Any:
        try:
            return await self.db.get(model, ident)
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise self._translate(exc, operation) from exc

    async def _commit(self, operation: str) -> None:
        """Commit the unit of work; roll back and translate on failure."""
        try:
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise self._translate(exc, operation) from exc

    def _translate(self, exc: SQLAlchemyError, operation: str):
        error = map_database_error(exc, self.resource, operation)
        log = logger.error if error.http_status >= 500 else logger.warning
        log(
            f"{self.resource} {operation} failed: {error.code}",
            extra={"error_code": error.code},
        )
        return error
