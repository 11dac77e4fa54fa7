"""Infrastructure Layer: database access and observability.

Invariants:
    - Infrastructure never holds business rules; it stores and logs
"""
