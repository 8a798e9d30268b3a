"""Store ORM — belongs to a user, owns products.

Invariants:
    - user_id is required and references users.id (ON DELETE CASCADE)
    - products relationship ordered newest first
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Store(Base):
    """Store entity — a shop owned by one user."""
    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    user: Mapped["User"] = relationship("User", back_populates="stores")
    products: Mapped[list["Product"]] = relationship(
        "Product", back_populates="store",
        cascade="all, delete-orphan", passive_deletes=True,
        order_by="desc(Product.created_at), desc(Product.id)",
    )

    def __repr__(self):
        return f"<Store(id={self.id}, name='{self.name}', user_id={self.user_id})>"
