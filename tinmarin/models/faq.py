"""FAQ ORM — a frequently-asked question and its answer.

Invariants:
    - question is unique (backs the pre-create duplicate check)
    - question and answer are non-nullable text
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tinmarin.db.base import Base, DocumentMixin


class FAQ(DocumentMixin, Base):
    __tablename__ = "faqs"

    question: Mapped[str] = mapped_column(
        String(500), nullable=False, unique=True,
    )
    answer: Mapped[str] = mapped_column(Text, nullable=False)
