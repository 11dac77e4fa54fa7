"""Product ORM: persists the single catalogue entity.

Invariants:
    - id is an autoincrement integer primary key, assigned by the database
    - name and price are non-nullable; availability is non-nullable, default true
    - created_at/updated_at are bookkeeping only and never leave this layer
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from products_api.core.domain_types import ProductId, ProductRecord
from products_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """Product row."""
    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def to_record(self) -> ProductRecord:
        return ProductRecord(
            id=ProductId(self.id),
            name=self.name,
            price=self.price,
            availability=self.availability,
        )
