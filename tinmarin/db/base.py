"""SQLAlchemy Declarative Base — shared base class and columns for all documents.

Invariants:
    - All models inherit from Base
    - id is assigned at insert time and never updated
    - created_at/updated_at are UTC, maintained by SQLAlchemy (not by callers)

Design Decisions:
    - id stored as 32-char hex string: portable across PostgreSQL and SQLite
      and matches the format checked by core/identifiers.py
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from tinmarin.core.identifiers import ID_LENGTH, new_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all TinMarin ORM models."""
    pass


class DocumentMixin:
    """Columns every stored document carries."""

    id: Mapped[str] = mapped_column(
        String(ID_LENGTH), primary_key=True, default=new_id,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
