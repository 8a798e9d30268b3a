"""Store Routes — create, read with owner and products, partial update, delete.

Invariants:
    - POST returns the store with its owner embedded (404 if the owner is missing)
    - GET embeds owner (no password) and products newest first
    - PUT leaves omitted fields untouched
"""

from fastapi import APIRouter, Depends, Response, status

from storefront.api.dependencies import IdPath, get_store_repository
from storefront.core.domain_types import StoreId, UserId
from storefront.core.repository_protocols import StoreRepository
from storefront.schemas.catalog import StoreDetail
from storefront.schemas.store import (
    StoreCreate, StoreRead, StoreUpdate, StoreWithOwner,
)

router = APIRouter(prefix="/stores", tags=["stores"])


@router.post(
    "", response_model=StoreWithOwner, status_code=status.HTTP_201_CREATED,
)
async def create_store(
    body: StoreCreate, stores: StoreRepository = Depends(get_store_repository),
):
    return await stores.create(body.name, UserId(body.user_id))


@router.get("/{store_id}", response_model=StoreDetail)
async def get_store(
    store_id: IdPath, stores: StoreRepository = Depends(get_store_repository),
):
    return await stores.get_with_details(StoreId(store_id))


@router.put("/{store_id}", response_model=StoreRead)
async def update_store(
    store_id: IdPath,
    body: StoreUpdate,
    stores: StoreRepository = Depends(get_store_repository),
):
    return await stores.update(StoreId(store_id), body.changes())


@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_store(
    store_id: IdPath, stores: StoreRepository = Depends(get_store_repository),
):
    await stores.delete(StoreId(store_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
