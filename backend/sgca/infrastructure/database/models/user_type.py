"""SQLAlchemy ORM model for the UserType entity."""

import uuid

from sqlalchemy import ForeignKey, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sgca.infrastructure.database.base import Base

from .application import ApplicationModel
from .mixins import AuditColumnsMixin


class UserTypeModel(AuditColumnsMixin, Base):
    """ORM model — maps to the 'user_types' table."""

    __tablename__ = "user_types"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    application_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("applications.id"), nullable=False, index=True
    )
    state: Mapped[str] = mapped_column(String(20), nullable=False, default="ACTIVO", index=True)

    application: Mapped[ApplicationModel] = relationship(lazy="joined")

    def __repr__(self) -> str:
        return f"<UserTypeModel(id={self.id}, name='{self.name}')>"


Index(
    "uq_user_types_name_active",
    func.lower(UserTypeModel.name),
    UserTypeModel.application_id,
    unique=True,
    sqlite_where=UserTypeModel.deleted_at.is_(None),
    postgresql_where=UserTypeModel.deleted_at.is_(None),
)
