"""Product Routes — create, list with store and owner, partial update, delete."""

from fastapi import APIRouter, Depends, Response, status

from storefront.api.dependencies import IdPath, get_product_repository
from storefront.core.domain_types import ProductId, StoreId
from storefront.core.repository_protocols import ProductRepository
from storefront.schemas.catalog import ProductWithStore
from storefront.schemas.product import ProductCreate, ProductRead, ProductUpdate

router = APIRouter(prefix="/products", tags=["products"])


@router.post(
    "", response_model=ProductRead, status_code=status.HTTP_201_CREATED,
)
async def create_product(
    body: ProductCreate,
    products: ProductRepository = Depends(get_product_repository),
):
    return await products.create(body.name, body.price, StoreId(body.store_id))


@router.get("", response_model=list[ProductWithStore])
async def list_products(
    products: ProductRepository = Depends(get_product_repository),
):
    """All products, each with its store and the store's owner."""
    return await products.list_with_owners()


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: IdPath,
    body: ProductUpdate,
    products: ProductRepository = Depends(get_product_repository),
):
    return await products.update(ProductId(product_id), body.changes())


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: IdPath,
    products: ProductRepository = Depends(get_product_repository),
):
    await products.delete(ProductId(product_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
