"""Product Handlers: lifecycle and storage boundary against an in-memory repository.

Invariants:
    - get/replace/toggle/delete on an absent id raise ProductNotFoundError
    - Any repository exception surfaces as DatabaseError with the operation name
    - ProductNotFoundError is never rewrapped as DatabaseError
"""

import pytest

from products_api.core.domain_types import ProductFields, ProductId, ProductRecord
from products_api.core.errors import DatabaseError, ProductNotFoundError
from products_api.services.product_handlers import ProductHandlers


class InMemoryProductRepository:
    """ProductRepository over a dict, ids never reused."""

    def __init__(self):
        self.rows: dict[int, ProductRecord] = {}
        self.saves = 0
        self._next_id = 1

    async def list_all(self):
        return [self.rows[k] for k in sorted(self.rows, reverse=True)]

    async def get(self, product_id):
        return self.rows.get(product_id)

    async def insert(self, fields):
        record = ProductRecord(
            id=ProductId(self._next_id), name=fields.name,
            price=fields.price, availability=fields.availability,
        )
        self.rows[record.id] = record
        self._next_id += 1
        return record

    async def save(self, record):
        self.saves += 1
        self.rows[record.id] = record
        return record

    async def delete(self, product_id):
        self.rows.pop(product_id, None)


class FailingProductRepository:
    async def _boom(self, *args):
        raise ConnectionError("database unreachable")

    list_all = get = insert = save = delete = _boom


@pytest.fixture
def repo():
    return InMemoryProductRepository()


@pytest.fixture
def handlers(repo):
    return ProductHandlers(repo)


async def test_create_assigns_fresh_ids(handlers):
    first = await handlers.create_product(ProductFields("Mouse", 50.0))
    second = await handlers.create_product(ProductFields("Teclado", 25.0))

    assert first.id != second.id
    assert first.availability is True


async def test_list_is_newest_first(handlers):
    for name in ("a", "b", "c"):
        await handlers.create_product(ProductFields(name, 1.0))

    assert [p.name for p in await handlers.list_products()] == ["c", "b", "a"]


async def test_get_absent_product_raises_not_found(handlers):
    with pytest.raises(ProductNotFoundError) as info:
        await handlers.get_product(ProductId(2000))
    assert info.value.product_id == 2000


async def test_replace_writes_once(handlers, repo):
    created = await handlers.create_product(ProductFields("Mouse", 50.0))

    updated = await handlers.replace_product(
        created.id, ProductFields("Mouse Pro", 75.0, False),
    )

    assert updated == ProductRecord(created.id, "Mouse Pro", 75.0, False)
    assert repo.rows[created.id] == updated
    assert repo.saves == 1


async def test_replace_absent_product_does_not_write(handlers, repo):
    with pytest.raises(ProductNotFoundError):
        await handlers.replace_product(ProductId(9), ProductFields("X", 1.0))
    assert repo.saves == 0


async def test_toggle_flips_stored_value(handlers, repo):
    created = await handlers.create_product(ProductFields("Mouse", 50.0, True))

    toggled = await handlers.toggle_availability(created.id)

    assert toggled.availability is False
    assert repo.rows[created.id].availability is False
    assert repo.rows[created.id].name == "Mouse"


async def test_toggle_absent_product_raises_not_found(handlers):
    with pytest.raises(ProductNotFoundError):
        await handlers.toggle_availability(ProductId(9))


async def test_delete_then_get_raises_not_found(handlers):
    created = await handlers.create_product(ProductFields("Mouse", 50.0))

    await handlers.delete_product(created.id)

    with pytest.raises(ProductNotFoundError):
        await handlers.get_product(created.id)


async def test_delete_absent_product_raises_not_found(handlers):
    with pytest.raises(ProductNotFoundError):
        await handlers.delete_product(ProductId(9))


@pytest.mark.parametrize(
    ("operation", "call"),
    [
        ("list", lambda h: h.list_products()),
        ("get", lambda h: h.get_product(ProductId(1))),
        ("create", lambda h: h.create_product(ProductFields("Mouse", 50.0))),
        ("replace", lambda h: h.replace_product(ProductId(1), ProductFields("M", 1.0))),
        ("toggle_availability", lambda h: h.toggle_availability(ProductId(1))),
        ("delete", lambda h: h.delete_product(ProductId(1))),
    ],
)
async def test_repository_failure_becomes_database_error(operation, call):
    handlers = ProductHandlers(FailingProductRepository())

    with pytest.raises(DatabaseError) as info:
        await call(handlers)

    assert info.value.operation == operation
    assert info.value.to_response() == {"error": "Database error"}
    assert isinstance(info.value.__cause__, ConnectionError)
