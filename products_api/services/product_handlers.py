"""Product Handlers: the six product operations behind the routes.

Invariants:
    - Handlers only run on requests that passed their validation rule set
    - Every operation except list and create resolves Absent/Present first;
      Absent raises ProductNotFoundError (404)
    - Any repository failure is logged and re-raised as DatabaseError (500);
      ProductApiError subclasses pass through unchanged
    - No retry, no partial-state recovery: the caller re-requests

Design Decisions:
    - Repository injected through the constructor
    - Mutations are snapshot -> pure transition (core/product_lifecycle) -> one save()
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from products_api.core.domain_types import ProductFields, ProductId, ProductRecord
from products_api.core.errors import DatabaseError, ProductApiError, ProductNotFoundError
from products_api.core import product_lifecycle
from products_api.core.repository_protocols import ProductRepository

logger = logging.getLogger(__name__)


@contextmanager
def storage_boundary(operation: str, product_id: int | None = None) -> Iterator[None]:
    """Convert unexpected persistence failures into DatabaseError."""
    try:
        yield
    except ProductApiError:
        raise
    except Exception as e:
        logger.error(
            f"Storage failure during {operation}: {e}",
            extra={
                "operation": operation,
                "product_id": product_id,
                "error_code": "DATABASE_ERROR",
            },
            exc_info=True,
        )
        raise DatabaseError(operation, str(e)) from e


class ProductHandlers:
    """Business logic for product CRUD, one method per route."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def list_products(self) -> list[ProductRecord]:
        with storage_boundary("list"):
            return await self._repository.list_all()

    async def get_product(self, product_id: ProductId) -> ProductRecord:
        with storage_boundary("get", product_id):
            return await self._get_or_404(product_id)

    async def create_product(self, fields: ProductFields) -> ProductRecord:
        with storage_boundary("create"):
            record = await self._repository.insert(fields)
        logger.info(f"Product {record.id} created", extra={"product_id": record.id})
        return record

    async def replace_product(
        self, product_id: ProductId, fields: ProductFields,
    ) -> ProductRecord:
        with storage_boundary("replace", product_id):
            current = await self._get_or_404(product_id)
            return await self._repository.save(
                product_lifecycle.replace_fields(current, fields),
            )

    async def toggle_availability(self, product_id: ProductId) -> ProductRecord:
        with storage_boundary("toggle_availability", product_id):
            current = await self._get_or_404(product_id)
            return await self._repository.save(
                product_lifecycle.toggle_availability(current),
            )

    async def delete_product(self, product_id: ProductId) -> None:
        with storage_boundary("delete", product_id):
            await self._get_or_404(product_id)
            await self._repository.delete(product_id)
        logger.info(f"Product {product_id} deleted", extra={"product_id": product_id})

    async def _get_or_404(self, product_id: ProductId) -> ProductRecord:
        record = await self._repository.get(product_id)
        if record is None:
            raise ProductNotFoundError(product_id)
        return record
