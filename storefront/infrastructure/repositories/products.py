"""Product Repository — create, list with store and owner, partial update, delete.

Invariants:
    - created_at and updated_at share one timestamp on create
    - updated_at is stamped explicitly on every update
    - a store_id that references no store surfaces as ForeignKeyViolationError
"""

import logging
from datetime import datetime, timezone
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.core.domain_types import ProductId, StoreId
from storefront.core.errors import ResourceNotFoundError
from storefront.infrastructure.repositories.base import SqlRepository
from storefront.models.product import Product
from storefront.models.store import Store

logger = logging.getLogger(__name__)


class SqlProductRepository(SqlRepository):
    resource = "Product"

    async def create(self, name: str, price: float, store_id: StoreId) -> Product:
        now = datetime.now(timezone.utc)
        product = Product(
            name=name, price=price, store_id=store_id,
            created_at=now, updated_at=now,
        )
        self.db.add(product)
        await self._commit("create")
        logger.info(
            "Product created",
            extra={"product_id": product.id, "store_id": store_id},
        )
        return product

    async def list_with_owners(self) -> Sequence[Product]:
        result = await self._run(
            select(Product)
            .options(selectinload(Product.store).selectinload(Store.user))
            .order_by(Product.id.asc())
        )
        return result.scalars().all()

    async def update(
        self, product_id: ProductId, changes: dict[str, Any],
    ) -> Product:
        product = await self._get(Product, product_id)
        if product is None:
            raise ResourceNotFoundError(self.resource, product_id)
        for field, value in changes.items():
            setattr(product, field, value)
        product.updated_at = datetime.now(timezone.utc)
        await self._commit("update")
        await self.db.refresh(product)
        return product

    async def delete(self, product_id: ProductId) -> None:
        product = await self._get(Product, product_id)
        if product is None:
            raise ResourceNotFoundError(self.resource, product_id)
        await self.db.delete(product)
        await self._commit("delete")
        logger.info("Product deleted", extra={"product_id": product_id})
