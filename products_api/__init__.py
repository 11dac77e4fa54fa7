"""Products API package: REST CRUD over the products table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
