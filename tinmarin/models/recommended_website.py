"""RecommendedWebsite ORM — a link suggested to application users.

Invariants:
    - No uniqueness constraint: the same site may be recommended twice
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from tinmarin.db.base import Base, DocumentMixin


class RecommendedWebsite(DocumentMixin, Base):
    __tablename__ = "recommended_websites"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
