"""Services Layer — async orchestration between routes and repositories.

Invariants:
    - Services await repositories and call pure core functions; no HTTP types here
"""
