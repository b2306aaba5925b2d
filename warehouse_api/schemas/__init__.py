"""Pydantic Schemas — request/response validation for the catalog endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, responses)
    - JSON uses camelCase names; Python attributes are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
