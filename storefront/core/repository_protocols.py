"""Boundary Protocols — contracts between route handlers and persistence.

Invariants:
    - Routes depend on these Protocols, never on SQLAlchemy sessions
    - Implementations raise StorefrontError subclasses only (never driver errors)
    - Partial updates receive only explicitly supplied fields

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Any, Protocol, Sequence

from storefront.core.domain_types import ProductId, StoreId, UserId


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def create(self, name: str, email: str, password: str) -> Any: ...
    async def list_all(self) -> Sequence[Any]: ...
    async def delete(self, user_id: UserId) -> None: ...


class StoreRepository(Protocol):
    """Contract for store persistence."""
    async def create(self, name: str, user_id: UserId) -> Any: ...
    async def get_with_details(self, store_id: StoreId) -> Any: ...
    async def update(self, store_id: StoreId, changes: dict[str, Any]) -> Any: ...
    async def delete(self, store_id: StoreId) -> None: ...


class ProductRepository(Protocol):
    """Contract for product persistence."""
    async def create(self, name: str, price: float, store_id: StoreId) -> Any: ...
    async def list_with_owners(self) -> Sequence[Any]: ...
    async def update(
        self, product_id: ProductId, changes: dict[str, Any],
    ) -> Any: ...
    async def delete(self, product_id: ProductId) -> None: ...
