"""Pydantic Schemas: response models and documented request bodies.

Invariants:
    - Schemas describe the API boundary; persistence shapes live in models/
"""
