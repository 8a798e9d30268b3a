"""Store Schemas — request bodies and flat/owned response views."""

from datetime import datetime

from pydantic import Field, field_validator

from storefront.core.domain_types import MAX_ID
from storefront.schemas.base import CamelModel, PartialUpdate
from storefront.schemas.user import UserSummary


class StoreCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    user_id: int = Field(gt=0, le=MAX_ID)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class StoreUpdate(PartialUpdate):
    name: str | None = Field(None, min_length=1, max_length=200)
    user_id: int | None = Field(None, gt=0, le=MAX_ID)


class StoreRead(CamelModel):
    id: int
    name: str
    user_id: int
    created_at: datetime
    updated_at: datetime


class StoreWithOwner(StoreRead):
    """Store plus its owner (id, name, email only)."""
    user: UserSummary
