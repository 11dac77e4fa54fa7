"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps int; the store assigns it and handlers never invent one
    - ProductRecord is an immutable snapshot; a mutation produces a new record
    - ProductRecord never carries bookkeeping timestamps
    - Request locations encoded as Enum: no raw string matching

Design Decisions:
    - NewType for identifiers, frozen dataclass for snapshots
    - str Enum for RequestLocation: serializes straight into violation payloads
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)


# ─── Enums ───────────────────────────────────────────────────────

class RequestLocation(str, Enum):
    """Where a validated value lives in the incoming request."""
    PARAMS = "params"
    BODY = "body"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class ProductFields:
    """Mutable columns of a product, already coerced to their Python types."""
    name: str
    price: float
    availability: bool = True


@dataclass(frozen=True)
class ProductRecord:
    """Persisted product as seen by handlers and clients."""
    id: ProductId
    name: str
    price: float
    availability: bool

    @property
    def fields(self) -> ProductFields:
        return ProductFields(
            name=self.name, price=self.price, availability=self.availability,
        )

    def to_public(self) -> dict:
        """Outward representation: id, name, price, availability."""
        return asdict(self)
