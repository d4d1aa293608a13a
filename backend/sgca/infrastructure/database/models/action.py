"""SQLAlchemy ORM model for the Action entity."""

import uuid

from sqlalchemy import ForeignKey, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sgca.infrastructure.database.base import Base

from .application import ApplicationModel
from .mixins import AuditColumnsMixin
from .section import SectionModel


class ActionModel(AuditColumnsMixin, Base):
    """ORM model — maps to the 'actions' table."""

    __tablename__ = "actions"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    application_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("applications.id"), nullable=False, index=True
    )
    section_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("sections.id"), nullable=False, index=True
    )

    application: Mapped[ApplicationModel] = relationship(lazy="joined")
    section: Mapped[SectionModel] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<ActionModel(id={self.id}, name='{self.name}')>"


Index(
    "uq_actions_name_active",
    func.lower(ActionModel.name),
    ActionModel.application_id,
    ActionModel.section_id,
    unique=True,
    sqlite_where=ActionModel.deleted_at.is_(None),
    postgresql_where=ActionModel.deleted_at.is_(None),
)
