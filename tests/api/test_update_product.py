"""PUT /api/products/{id}: full replace.

Invariants:
    - Empty body on a valid id → exactly 5 violations
    - availability is required
    - id is preserved; name, price, availability all overwritten
"""

PRODUCTS_URL = "/api/products"


async def test_empty_body_reports_five_violations(client, make_product):
    product = await make_product()

    res = await client.put(f"{PRODUCTS_URL}/{product.id}", json={})

    assert res.status_code == 400
    errors = res.json()["errors"]
    assert len(errors) == 5
    assert [e["path"] for e in errors] == [
        "name", "price", "price", "price", "availability",
    ]


async def test_invalid_id_is_reported_with_body_violations(client):
    res = await client.put(f"{PRODUCTS_URL}/not-valid-url", json={})

    assert res.status_code == 400
    errors = res.json()["errors"]
    assert len(errors) == 6
    assert errors[0]["msg"] == "ID no válido"


async def test_zero_price_reports_one_violation(client, make_product):
    product = await make_product()

    res = await client.put(
        f"{PRODUCTS_URL}/{product.id}",
        json={"name": "Monitor Curvo", "price": 0, "availability": True},
    )

    assert res.status_code == 400
    errors = res.json()["errors"]
    assert len(errors) == 1
    assert errors[0]["msg"] == "El precio no es válido"


async def test_missing_availability_is_rejected(client, make_product):
    product = await make_product()

    res = await client.put(
        f"{PRODUCTS_URL}/{product.id}", json={"name": "Monitor", "price": 300},
    )

    assert res.status_code == 400
    errors = res.json()["errors"]
    assert len(errors) == 1
    assert errors[0]["msg"] == "Valor para la disponibilidad no válida"


async def test_update_nonexistent_product_returns_404(client):
    res = await client.put(
        f"{PRODUCTS_URL}/2000",
        json={"name": "Monitor Curvo", "price": 300, "availability": True},
    )

    assert res.status_code == 404
    assert res.json()["error"] == "Producto no encontrado"


async def test_update_replaces_every_field(client, make_product):
    product = await make_product(name="Monitor", price=300, availability=True)

    res = await client.put(
        f"{PRODUCTS_URL}/{product.id}",
        json={"name": "Monitor Curvo", "price": 350, "availability": "false"},
    )

    assert res.status_code == 200
    assert res.json()["data"] == {
        "id": product.id, "name": "Monitor Curvo",
        "price": 350, "availability": False,
    }


async def test_update_is_persisted(client, make_product):
    product = await make_product()
    await client.put(
        f"{PRODUCTS_URL}/{product.id}",
        json={"name": "Renombrado", "price": 1.5, "availability": False},
    )

    res = await client.get(f"{PRODUCTS_URL}/{product.id}")

    assert res.json()["data"]["name"] == "Renombrado"
    assert res.json()["data"]["price"] == 1.5
    assert res.json()["data"]["availability"] is False
