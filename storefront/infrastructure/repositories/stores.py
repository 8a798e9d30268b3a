"""Store Repository — create, read with owner and products, partial update, delete.

Invariants:
    - create verifies the owning user exists before inserting (404 otherwise)
    - get_with_details loads owner and products eagerly; products newest first
    - update applies only the supplied fields; a dangling user_id is a FK violation
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.core.domain_types import StoreId, UserId
from storefront.core.errors import ResourceNotFoundError
from storefront.infrastructure.repositories.base import SqlRepository
from storefront.models.store import Store
from storefront.models.user import User

logger = logging.getLogger(__name__)


class SqlStoreRepository(SqlRepository):
    resource = "Store"

    async def create(self, name: str, user_id: UserId) -> Store:
        owner = await self._get(User, user_id)
        if owner is None:
            raise ResourceNotFoundError("User", user_id)
        now = datetime.now(timezone.utc)
        store = Store(name=name, user=owner, created_at=now, updated_at=now)
        self.db.add(store)
        await self._commit("create")
        logger.info(
            "Store created", extra={"store_id": store.id, "user_id": user_id},
        )
        return store

    async def get_with_details(self, store_id: StoreId) -> Store:
        result = await self._run(
            select(Store)
            .where(Store.id == store_id)
            .options(selectinload(Store.user), selectinload(Store.products))
            .execution_options(populate_existing=True)
        )
        store = result.scalar_one_or_none()
        if store is None:
            raise ResourceNotFoundError(self.resource, store_id)
        return store

    async def update(self, store_id: StoreId, changes: dict[str, Any]) -> Store:
        store = await self._get(Store, store_id)
        if store is None:
            raise ResourceNotFoundError(self.resource, store_id)
        for field, value in changes.items():
            setattr(store, field, value)
        await self._commit("update")
        await self.db.refresh(store)
        return store

    async def delete(self, store_id: StoreId) -> None:
        store = await self._get(Store, store_id)
        if store is None:
            raise ResourceNotFoundError(self.resource, store_id)
        await self.db.delete(store)
        await self._commit("delete")
        logger.info("Store deleted", extra={"store_id": store_id})
