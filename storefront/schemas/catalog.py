"""Nested Read Views — stores with products, products with store and owner."""

from storefront.schemas.product import ProductRead
from storefront.schemas.store import StoreWithOwner


class StoreDetail(StoreWithOwner):
    """GET /stores/{id} — owner plus products, newest first."""
    products: list[ProductRead]


class ProductWithStore(ProductRead):
    """GET /products — each product with its store and the store's owner."""
    store: StoreWithOwner
