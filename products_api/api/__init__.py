"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes are thin: validate, call a handler, wrap the result in {"data": ...}
"""
