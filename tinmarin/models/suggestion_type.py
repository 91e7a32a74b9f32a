"""SuggestionType ORM — a category users can file suggestions under."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from tinmarin.db.base import Base, DocumentMixin


class SuggestionType(DocumentMixin, Base):
    __tablename__ = "suggestion_types"

    name: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
