"""Product Schemas — request bodies and flat response view.

Invariants:
    - price and storeId accept numeric strings ("10", "3") and are coerced to numbers
    - price is never negative
"""

from datetime import datetime

from pydantic import Field, field_validator

from storefront.core.domain_types import MAX_ID
from storefront.schemas.base import CamelModel, PartialUpdate


class ProductCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    price: float = Field(ge=0, allow_inf_nan=False)
    store_id: int = Field(gt=0, le=MAX_ID)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProductUpdate(PartialUpdate):
    name: str | None = Field(None, min_length=1, max_length=200)
    price: float | None = Field(None, ge=0, allow_inf_nan=False)
    store_id: int | None = Field(None, gt=0, le=MAX_ID)


class ProductRead(CamelModel):
    id: int
    name: str
    price: float
    store_id: int
    created_at: datetime
    updated_at: datetime
