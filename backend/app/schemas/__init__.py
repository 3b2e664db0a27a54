"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas define the JSON shape at the system boundary

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
