"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping
    - save() is the single write for an existing product: callers compute the
      full next snapshot first, there is no separate "modify then persist" step
"""

from typing import Protocol

from products_api.core.domain_types import ProductFields, ProductId, ProductRecord


class ProductRepository(Protocol):
    """Contract for product persistence, implemented by infrastructure/."""
    async def list_all(self) -> list[ProductRecord]: ...
    async def get(self, product_id: ProductId) -> ProductRecord | None: ...
    async def insert(self, fields: ProductFields) -> ProductRecord: ...
    async def save(self, record: ProductRecord) -> ProductRecord: ...
    async def delete(self, product_id: ProductId) -> None: ...
