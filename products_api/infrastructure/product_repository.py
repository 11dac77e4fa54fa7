"""SQL Product Repository: ProductRepository implemented over an AsyncSession.

Invariants:
    - Every write commits before returning; callers never see uncommitted state
    - Returns ProductRecord snapshots, never live ORM instances
    - list_all orders by id descending (newest first)
    - Errors propagate untouched; the handler boundary decides how to answer
    - A row deleted between lookup and save() raises LookupError, answered as a
      storage failure (500) rather than 404: concurrent writes are last-write-wins
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.domain_types import ProductFields, ProductId, ProductRecord
from products_api.models.product import Product


class SqlProductRepository:
    """ProductRepository backed by the products table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[ProductRecord]:
        result = await self._db.execute(
            select(Product).order_by(Product.id.desc()),
        )
        return [row.to_record() for row in result.scalars().all()]

    async def get(self, product_id: ProductId) -> ProductRecord | None:
        row = await self._db.get(Product, product_id)
        return row.to_record() if row else None

    async def insert(self, fields: ProductFields) -> ProductRecord:
        row = Product(
            name=fields.name,
            price=fields.price,
            availability=fields.availability,
        )
        self._db.add(row)
        await self._db.commit()
        await self._db.refresh(row)
        return row.to_record()

    async def save(self, record: ProductRecord) -> ProductRecord:
        row = await self._db.get(Product, record.id)
        if row is None:
            raise LookupError(f"Product {record.id} vanished before save")
        row.name = record.name
        row.price = record.price
        row.availability = record.availability
        await self._db.commit()
        await self._db.refresh(row)
        return row.to_record()

    async def delete(self, product_id: ProductId) -> None:
        row = await self._db.get(Product, product_id)
        if row is None:
            return
        await self._db.delete(row)
        await self._db.commit()
