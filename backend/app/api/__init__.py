"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Errors answered with the structured envelope, except the cities 404 (empty body)

Design Decisions:
    - Thin routes delegate to services
"""
