"""User Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - UserCreate: name, email, password required and non-empty after strip
    - email matches local@domain.tld (no whitespace, exactly one @ before the domain)
    - UserRead and UserSummary never carry password
"""

from datetime import datetime

from pydantic import Field, field_validator

from storefront.schemas.base import CamelModel

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class UserCreate(CamelModel):
    """User creation — validates presence and email shape."""
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    @field_validator("password")
    @classmethod
    def reject_blank_password(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("password cannot be empty or whitespace")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserSummary(CamelModel):
    """Owner view embedded in stores and products."""
    id: int
    name: str
    email: str


class UserRead(UserSummary):
    """User response — public-facing user data."""
    created_at: datetime
