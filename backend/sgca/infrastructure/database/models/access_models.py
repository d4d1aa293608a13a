"""SQLAlchemy ORM models for the access-control tables.

These tables are part of the schema (users, their sessions, role
assignments, per-role permissions and the access audit trail) but no
service reads or writes them yet.
"""

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from sgca.domain.entities.base import utcnow
from sgca.infrastructure.database.base import Base

from .mixins import AuditColumnsMixin


class UserModel(AuditColumnsMixin, Base):
    """ORM model — maps to the 'users' table."""

    __tablename__ = "users"

    first_names: Mapped[str] = mapped_column(String(100), nullable=False)
    last_names: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    state: Mapped[str] = mapped_column(String(10), nullable=False, default="ACTIVO")
    two_factor_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    two_factor_totp_secret: Mapped[str | None] = mapped_column(String(255), nullable=True)
    failed_login_attempts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_failed_login_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    locked_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    password_changed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    must_change_password: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class SessionModel(AuditColumnsMixin, Base):
    """ORM model — maps to the 'sessions' table (login sessions, not DB sessions)."""

    __tablename__ = "sessions"

    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    token: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    user_email: Mapped[str] = mapped_column(String(100), nullable=False)
    source_ip: Mapped[str] = mapped_column(String(45), nullable=False)
    device_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    ended_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    state: Mapped[str] = mapped_column(String(10), nullable=False, default="ACTIVA")


class UserUserTypeModel(AuditColumnsMixin, Base):
    """ORM model — maps to the 'user_user_types' assignment table."""

    __tablename__ = "user_user_types"

    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    user_type_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("user_types.id"), nullable=False, index=True
    )


class UserTypePermissionModel(AuditColumnsMixin, Base):
    """ORM model — maps to the 'user_type_permissions' table (user type ⇄ action)."""

    __tablename__ = "user_type_permissions"

    user_type_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("user_types.id"), nullable=False, index=True
    )
    action_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("actions.id"), nullable=False, index=True)


class AccessAuditModel(Base):
    """ORM model — maps to the 'access_audits' table.

    Keyed by ``(id, event_at)`` so the table can be range-partitioned by date.
    ``user_id`` is empty for failed attempts by unknown users.
    """

    __tablename__ = "access_audits"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    event_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), primary_key=True, default=utcnow)
    user_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("users.id"), nullable=True, index=True)
    application_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("applications.id"), nullable=False, index=True
    )
    action_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("actions.id"), nullable=False, index=True)
    user_email: Mapped[str] = mapped_column(String(100), nullable=False)
    source_ip: Mapped[str] = mapped_column(String(45), nullable=False)
    device_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)
    state: Mapped[str] = mapped_column(String(10), nullable=False, default="EXITOSO")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
