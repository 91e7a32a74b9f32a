"""Database Definitions — SQLAlchemy declarative Base and shared column mixins.

Invariants:
    - All ORM models inherit from Base (db/base.py)
    - Engine and sessions live in infrastructure/database.py, never here
"""
