"""Product Lifecycle Transitions: pure next-state computation for existing products.

Invariants:
    - All functions are PURE: they take a snapshot and return a new one
    - id never changes across a transition
    - toggle_availability touches availability only; name and price carry over
    - replace_fields overwrites name, price and availability together
"""

from dataclasses import replace

from products_api.core.domain_types import ProductFields, ProductRecord


def replace_fields(record: ProductRecord, fields: ProductFields) -> ProductRecord:
    """Full replace (PUT): every mutable column takes the new value."""
    return replace(
        record,
        name=fields.name,
        price=fields.price,
        availability=fields.availability,
    )


def toggle_availability(record: ProductRecord) -> ProductRecord:
    """Partial update (PATCH): availability becomes its logical negation."""
    return replace(record, availability=not record.availability)
