"""SQLAlchemy ORM model for the Application entity."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sgca.infrastructure.database.base import Base

from .mixins import AuditColumnsMixin


class ApplicationModel(AuditColumnsMixin, Base):
    """ORM model — maps to the 'applications' table.

    ``identifier_key`` and ``url`` carry plain unique constraints: they stay
    reserved even after the application is soft-deleted.
    """

    __tablename__ = "applications"

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    identifier_key: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    state: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVO", index=True)

    def __repr__(self) -> str:
        return f"<ApplicationModel(id={self.id}, identifier_key='{self.identifier_key}')>"
