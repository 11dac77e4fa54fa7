"""Product Routes: the six product endpoints under /api/products.

Invariants:
    - Every route with an id or a body is guarded by its rule set (core/product_rules.py)
    - Routes never build error bodies; typed errors reach api/error_handlers.py
    - Success envelopes: {"data": product}, {"data": [products]}, {"data": "Producto eliminado"}

Design Decisions:
    - Path id declared through openapi_extra instead of the signature: the raw
      string must reach the rule set, FastAPI's own int coercion would answer first
"""

from fastapi import APIRouter, Depends, status

from products_api.api.dependencies import (
    ValidatedRequest, get_product_handlers, validated,
)
from products_api.core.domain_types import ProductId
from products_api.core.product_rules import (
    CREATE_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    REPLACE_PRODUCT_RULES,
    to_product_fields,
)
from products_api.schemas.product import (
    ErrorEnvelope,
    MessageEnvelope,
    ProductCreate,
    ProductEnvelope,
    ProductListEnvelope,
    ProductReplace,
    ValidationErrorEnvelope,
    request_body_schema,
)
from products_api.services.product_handlers import ProductHandlers

router = APIRouter(prefix="/api/products", tags=["Products"])

PRODUCT_DELETED = "Producto eliminado"

_ID_PARAMETER = {
    "parameters": [{
        "name": "id",
        "in": "path",
        "required": True,
        "description": "The ID of the product",
        "schema": {"type": "integer"},
    }],
}

_ERRORS = {
    400: {"model": ValidationErrorEnvelope, "description": "Bad Request - Invalid input"},
    404: {"model": ErrorEnvelope, "description": "Not Found"},
    500: {"model": ErrorEnvelope, "description": "Database error"},
}


def _responses(*codes: int) -> dict:
    return {code: _ERRORS[code] for code in codes}


def _product_id(req: ValidatedRequest) -> ProductId:
    return ProductId(int(req.params["id"]))


@router.get(
    "", response_model=ProductListEnvelope, responses=_responses(500),
    summary="Get a list of products",
)
async def get_products(
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Return every product, newest first."""
    products = await handlers.list_products()
    return {"data": [p.to_public() for p in products]}


@router.get(
    "/{id}", response_model=ProductEnvelope,
    responses=_responses(400, 404, 500), openapi_extra=_ID_PARAMETER,
    summary="Get a product by ID",
)
async def get_product_by_id(
    req: ValidatedRequest = Depends(validated(PRODUCT_ID_RULES)),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    product = await handlers.get_product(_product_id(req))
    return {"data": product.to_public()}


@router.post(
    "", response_model=ProductEnvelope, status_code=status.HTTP_201_CREATED,
    responses=_responses(400, 500),
    openapi_extra=request_body_schema(ProductCreate),
    summary="Creates a new product",
)
async def create_product(
    req: ValidatedRequest = Depends(validated(CREATE_PRODUCT_RULES)),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Create a product; availability defaults to true."""
    product = await handlers.create_product(to_product_fields(req.body))
    return {"data": product.to_public()}


@router.put(
    "/{id}", response_model=ProductEnvelope,
    responses=_responses(400, 404, 500),
    openapi_extra={**_ID_PARAMETER, **request_body_schema(ProductReplace)},
    summary="Updates a product with user input",
)
async def update_product(
    req: ValidatedRequest = Depends(validated(REPLACE_PRODUCT_RULES)),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Replace name, price and availability of an existing product."""
    product = await handlers.replace_product(
        _product_id(req), to_product_fields(req.body),
    )
    return {"data": product.to_public()}


@router.patch(
    "/{id}", response_model=ProductEnvelope,
    responses=_responses(400, 404, 500), openapi_extra=_ID_PARAMETER,
    summary="Update Product availability",
)
async def update_availability(
    req: ValidatedRequest = Depends(validated(PRODUCT_ID_RULES)),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Flip the availability flag; name and price are left alone."""
    product = await handlers.toggle_availability(_product_id(req))
    return {"data": product.to_public()}


@router.delete(
    "/{id}", response_model=MessageEnvelope,
    responses=_responses(400, 404, 500), openapi_extra=_ID_PARAMETER,
    summary="Deletes a product by a given ID",
)
async def delete_product(
    req: ValidatedRequest = Depends(validated(PRODUCT_ID_RULES)),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    await handlers.delete_product(_product_id(req))
    return {"data": PRODUCT_DELETED}
