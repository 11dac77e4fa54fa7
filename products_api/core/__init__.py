"""Core Layer: domain types, validation rules, lifecycle transitions.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Everything except the repository Protocol is pure and synchronous
"""
