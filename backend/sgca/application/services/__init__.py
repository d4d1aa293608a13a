from .application_service import ApplicationService
from .section_service import SectionService
from .action_service import ActionService
from .user_type_service import UserTypeService

__all__ = [
    "ApplicationService",
    "SectionService",
    "ActionService",
    "UserTypeService",
]
