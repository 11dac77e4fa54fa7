"""Product Schemas: Pydantic models describing the product API contract.

Invariants:
    - ProductResponse is the only product shape that leaves the API
      (no created_at/updated_at)
    - Request models document the bodies; enforcement is the rule sets in
      core/product_rules.py, so every violation is reported at once
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProductResponse(BaseModel):
    """Public product representation."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1, "name": 'Monitor Curvo 49"',
                "price": 300, "availability": True,
            },
        },
    )

    id: int
    name: str
    price: float
    availability: bool


class ProductCreate(BaseModel):
    """Body of POST /api/products."""
    name: str = Field(min_length=1, examples=['Monitor Curvo 49"'])
    price: float = Field(gt=0, examples=[399])
    availability: bool = True


class ProductReplace(BaseModel):
    """Body of PUT /api/products/{id}."""
    name: str = Field(min_length=1, examples=['Monitor Curvo 49"'])
    price: float = Field(gt=0, examples=[399])
    availability: bool = Field(examples=[True])


class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: list[ProductResponse]


class MessageEnvelope(BaseModel):
    data: str = Field(examples=["Producto eliminado"])


class ViolationResponse(BaseModel):
    """One validation failure."""
    type: str = "field"
    msg: str
    path: str
    location: str
    value: Any = None


class ValidationErrorEnvelope(BaseModel):
    errors: list[ViolationResponse]


class ErrorEnvelope(BaseModel):
    error: str = Field(examples=["Producto no encontrado"])


def request_body_schema(model: type[BaseModel]) -> dict:
    """OpenAPI requestBody for routes that read the raw JSON body."""
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": model.model_json_schema()},
            },
        },
    }
