"""SQLAlchemy ORM model for the Section entity."""

from sqlalchemy import Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from sgca.infrastructure.database.base import Base

from .mixins import AuditColumnsMixin


class SectionModel(AuditColumnsMixin, Base):
    """ORM model — maps to the 'sections' table."""

    __tablename__ = "sections"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<SectionModel(id={self.id}, name='{self.name}')>"


# Names are unique (case-insensitive) among active sections only.
Index(
    "uq_sections_name_active",
    func.lower(SectionModel.name),
    unique=True,
    sqlite_where=SectionModel.deleted_at.is_(None),
    postgresql_where=SectionModel.deleted_at.is_(None),
)
