"""User Repository — create, list, delete.

Invariants:
    - list_all orders by ascending id
    - delete relies on ON DELETE CASCADE for stores and products
"""

import logging
from typing import Sequence

from sqlalchemy import select

from storefront.core.domain_types import UserId
from storefront.core.errors import ResourceNotFoundError
from storefront.infrastructure.repositories.base import SqlRepository
from storefront.models.user import User

logger = logging.getLogger(__name__)


class SqlUserRepository(SqlRepository):
    resource = "User"

    async def create(self, name: str, email: str, password: str) -> User:
        user = User(name=name, email=email, password=password)
        self.db.add(user)
        await self._commit("create")
        logger.info("User created", extra={"user_id": user.id})
        return user

    async def list_all(self) -> Sequence[User]:
        result = await self._run(select(User).order_by(User.id.asc()))
        return result.scalars().all()

    async def delete(self, user_id: UserId) -> None:
        user = await self._get(User, user_id)
        if user is None:
            raise ResourceNotFoundError(self.resource, user_id)
        await self.db.delete(user)
        await self._commit("delete")
        logger.info("User deleted", extra={"user_id": user_id})
