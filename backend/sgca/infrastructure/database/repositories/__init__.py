from .application_repository import SQLAlchemyApplicationRepository
from .section_repository import SQLAlchemySectionRepository
from .action_repository import SQLAlchemyActionRepository
from .user_type_repository import SQLAlchemyUserTypeRepository

__all__ = [
    "SQLAlchemyApplicationRepository",
    "SQLAlchemySectionRepository",
    "SQLAlchemyActionRepository",
    "SQLAlchemyUserTypeRepository",
]
