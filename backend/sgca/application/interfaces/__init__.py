from .application_repository import ApplicationRepository
from .section_repository import SectionRepository
from .action_repository import ActionRepository
from .user_type_repository import UserTypeRepository

__all__ = [
    "ApplicationRepository",
    "SectionRepository",
    "ActionRepository",
    "UserTypeRepository",
]
