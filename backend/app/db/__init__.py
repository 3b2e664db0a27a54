"""Database Metadata — SQLAlchemy declarative Base shared by all models.

Invariants:
    - Engine and sessions live in infrastructure/database.py, not here
"""
