"""ORM Models — SQLAlchemy declarative models for all stored documents.

Invariants:
    - All models inherit from Base (db/base.py)
    - Documents are flat and independent: no relationships between tables

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all or alembic autogenerate runs
"""

from tinmarin.models.faq import FAQ  # noqa: F401
from tinmarin.models.recommended_website import RecommendedWebsite  # noqa: F401
from tinmarin.models.suggestion_type import SuggestionType  # noqa: F401
