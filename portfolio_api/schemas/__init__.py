"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary before anything reaches a repository
    - Write schemas list every mutable column: no partial updates

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
