"""Product Route Rules: the validation contract of every product endpoint.

Invariants:
    - Rule order is the order violations are reported in
    - price carries three independent checks (numeric, non-empty, positive),
      so an empty body to create yields exactly 4 violations and to replace exactly 5
    - availability is required on replace and optional on create
    - to_product_fields only runs on bodies that already passed their rule set
"""

from typing import Any, Mapping

from products_api.core.domain_types import ProductFields, RequestLocation
from products_api.core.validation import (
    FieldRule,
    as_text,
    is_boolean,
    is_int,
    is_not_blank,
    is_not_empty,
    is_numeric,
    is_positive,
    to_bool,
    to_number,
)

PARAMS = RequestLocation.PARAMS
BODY = RequestLocation.BODY

INVALID_ID = "ID no válido"
EMPTY_NAME = "El nombre del producto no puede estar vacío"
INVALID_VALUE = "Valor no válido"
EMPTY_PRICE = "El precio del producto no puede estar vacío"
INVALID_PRICE = "El precio no es válido"
INVALID_AVAILABILITY = "Valor para la disponibilidad no válida"


_ID_RULES = (
    FieldRule(PARAMS, "id", is_int, INVALID_ID),
)

_NAME_RULES = (
    FieldRule(BODY, "name", is_not_blank, EMPTY_NAME),
)

_PRICE_RULES = (
    FieldRule(BODY, "price", is_numeric, INVALID_VALUE),
    FieldRule(BODY, "price", is_not_empty, EMPTY_PRICE),
    FieldRule(BODY, "price", is_positive, INVALID_PRICE),
)

PRODUCT_ID_RULES: tuple[FieldRule, ...] = _ID_RULES

CREATE_PRODUCT_RULES: tuple[FieldRule, ...] = (
    *_NAME_RULES,
    *_PRICE_RULES,
    FieldRule(BODY, "availability", is_boolean, INVALID_AVAILABILITY, optional=True),
)

REPLACE_PRODUCT_RULES: tuple[FieldRule, ...] = (
    *_ID_RULES,
    *_NAME_RULES,
    *_PRICE_RULES,
    FieldRule(BODY, "availability", is_boolean, INVALID_AVAILABILITY),
)


def to_product_fields(body: Mapping[str, Any]) -> ProductFields:
    """Coerce a validated body into typed product fields."""
    availability = body.get("availability")
    return ProductFields(
        name=as_text(body["name"]),
        price=to_number(body["price"]),
        availability=True if availability is None else to_bool(availability),
    )
