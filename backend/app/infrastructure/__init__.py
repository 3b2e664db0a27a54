"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ protocols; core never imports infrastructure
    - Driver exceptions mapped to core/errors.py types at the session boundary
"""
