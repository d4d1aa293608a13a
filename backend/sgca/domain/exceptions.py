"""Domain-specific exceptions — framework-independent.

Every error carries an ``ErrorKind``; the HTTP layer maps kinds to status codes
and nothing below it knows about HTTP.  Messages are user-facing (Spanish).
"""

from enum import Enum
from typing import Any

# Entity labels that take feminine agreement in messages.
_FEMININE = frozenset({"Aplicación", "Sección", "Acción"})


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_STATE = "invalid_state"
    VALIDATION = "validation"


class DomainError(Exception):
    """Base class for business-rule failures."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EntityNotFoundError(DomainError):
    """Raised when a target or referenced entity is absent or soft-deleted."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: Any, field: str = "ID"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        found = "encontrada" if entity_type in _FEMININE else "encontrado"
        super().__init__(f"{entity_type} no {found} con {field}: {entity_id}")


class DuplicateEntityError(DomainError):
    """Raised when a create, update or restore would break a uniqueness invariant."""

    kind = ErrorKind.CONFLICT

    def __init__(self, entity_type: str, field: str, value: str, scope: str | None = None):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        article = "una" if entity_type in _FEMININE else "un"
        message = f"Ya existe {article} {entity_type.lower()} con {field}: {value}"
        if scope:
            message = f"{message} {scope}"
        super().__init__(message)


class InvalidStateError(DomainError):
    """Raised when an operation requires a lifecycle state the entity is not in."""

    kind = ErrorKind.INVALID_STATE


class DomainValidationError(DomainError):
    """Raised when a payload or parameter violates format rules."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, errors: dict[str, str] | None = None):
        self.errors = errors
        super().__init__(message)
