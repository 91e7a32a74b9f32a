"""Infrastructure Layer — storage client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Storage faults surface as core/errors.py exceptions, never raw SQLAlchemy ones
"""
