"""Route Dependencies: request validation gate and handler injection.

Invariants:
    - validated() evaluates a route's whole rule set before the route body runs;
      any violation raises InputValidationError and the route body never runs
    - An empty request body reads as {}; a non-object or malformed body is a 400
    - get_product_handlers builds handlers on the request's own DB session
"""

import json
from dataclasses import dataclass, field
from typing import Any, Sequence

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from products_api.core.domain_types import RequestLocation
from products_api.core.errors import InputValidationError
from products_api.core.validation import FieldRule, Violation, evaluate_rules
from products_api.infrastructure.database import get_db
from products_api.infrastructure.product_repository import SqlProductRepository
from products_api.services.product_handlers import ProductHandlers

INVALID_BODY = "Cuerpo de la solicitud no válido"


@dataclass(frozen=True)
class ValidatedRequest:
    """Path params and JSON body of a request that passed its rules."""
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)


async def read_json_body(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise _invalid_body()
    if not isinstance(body, dict):
        raise _invalid_body()
    return body


def _invalid_body() -> InputValidationError:
    return InputValidationError([
        Violation(field="", message=INVALID_BODY, location=RequestLocation.BODY),
    ])


def validated(rules: Sequence[FieldRule]):
    """Dependency factory: run `rules` against the request, fail with every violation."""
    reads_body = any(r.location is RequestLocation.BODY for r in rules)

    async def dependency(request: Request) -> ValidatedRequest:
        params = dict(request.path_params)
        body = await read_json_body(request) if reads_body else {}
        violations = evaluate_rules(rules, params, body)
        if violations:
            raise InputValidationError(violations)
        return ValidatedRequest(params=params, body=body)

    return dependency


def get_product_handlers(db: AsyncSession = Depends(get_db)) -> ProductHandlers:
    return ProductHandlers(SqlProductRepository(db))
