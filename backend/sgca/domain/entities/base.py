"""Base entity contract shared by every catalog entity."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class BaseEntity:
    """Identity, audit timestamps and the soft-delete flag.

    An entity is *active* while ``deleted_at`` is ``None``.  Writes never remove
    rows: ``mark_deleted`` stamps ``deleted_at`` and ``mark_restored`` clears it.
    Every mutation goes through ``touch`` so ``updated_at`` strictly increases.
    """

    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None or self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def mark_deleted(self) -> None:
        """Soft-delete the entity."""
        self.touch()
        self.deleted_at = self.updated_at

    def mark_restored(self) -> None:
        """Clear the soft-delete marker."""
        self.deleted_at = None
        self.touch()

    def touch(self) -> None:
        """Refresh ``updated_at``; never moves backwards or stands still."""
        now = utcnow()
        if self.updated_at is not None and now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now
