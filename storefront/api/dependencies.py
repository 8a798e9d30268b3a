"""Request Dependencies — repositories injected into route handlers.

Invariants:
    - One repository instance per request, sharing the request's AsyncSession
    - Tests swap implementations through app.dependency_overrides
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain_types import MAX_ID
from storefront.core.repository_protocols import (
    ProductRepository, StoreRepository, UserRepository,
)
from storefront.infrastructure.database import get_db
from storefront.infrastructure.repositories import (
    SqlProductRepository, SqlStoreRepository, SqlUserRepository,
)

# Ids outside the column range can never exist; reject them as bad input
IdPath = Annotated[int, Path(gt=0, le=MAX_ID)]


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return SqlUserRepository(db)


async def get_store_repository(
    db: AsyncSession = Depends(get_db),
) -> StoreRepository:
    return SqlStoreRepository(db)


async def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    return SqlProductRepository(db)
