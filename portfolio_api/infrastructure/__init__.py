"""Infrastructure Layer — database pool and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or repositories/
    - Store failures leave this layer as typed errors from core/errors.py
"""
