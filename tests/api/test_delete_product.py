"""DELETE /api/products/{id}.

Invariants:
    - Existing id → 200 {"data": "Producto eliminado"}; afterwards GET → 404
    - Absent id → 404; non-integer id → 400
"""

from sqlalchemy import select

from products_api.models.product import Product

PRODUCTS_URL = "/api/products"


async def test_delete_product(client, make_product):
    product = await make_product()

    res = await client.delete(f"{PRODUCTS_URL}/{product.id}")

    assert res.status_code == 200
    assert res.json() == {"data": "Producto eliminado"}


async def test_deleted_product_is_gone(client, make_product):
    product = await make_product()
    await client.delete(f"{PRODUCTS_URL}/{product.id}")

    res = await client.get(f"{PRODUCTS_URL}/{product.id}")

    assert res.status_code == 404


async def test_delete_removes_row(client, make_product, test_session_factory):
    product = await make_product()
    await client.delete(f"{PRODUCTS_URL}/{product.id}")

    async with test_session_factory() as db:
        result = await db.execute(select(Product).where(Product.id == product.id))
        assert result.scalar_one_or_none() is None


async def test_delete_leaves_other_products(client, make_product):
    keep = await make_product(name="Conservar")
    drop = await make_product(name="Borrar")

    await client.delete(f"{PRODUCTS_URL}/{drop.id}")
    res = await client.get(PRODUCTS_URL)

    assert [p["id"] for p in res.json()["data"]] == [keep.id]


async def test_delete_nonexistent_product_returns_404(client):
    res = await client.delete(f"{PRODUCTS_URL}/2000")

    assert res.status_code == 404
    assert res.json()["error"] == "Producto no encontrado"


async def test_delete_with_invalid_id_returns_400(client):
    res = await client.delete(f"{PRODUCTS_URL}/not-valid-url")

    assert res.status_code == 400
    assert res.json()["errors"][0]["msg"] == "ID no válido"
