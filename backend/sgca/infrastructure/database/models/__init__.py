from .application import ApplicationModel
from .section import SectionModel
from .action import ActionModel
from .user_type import UserTypeModel
from .access_models import (
    AccessAuditModel,
    SessionModel,
    UserModel,
    UserTypePermissionModel,
    UserUserTypeModel,
)

__all__ = [
    "ApplicationModel",
    "SectionModel",
    "ActionModel",
    "UserTypeModel",
    "UserModel",
    "SessionModel",
    "UserUserTypeModel",
    "UserTypePermissionModel",
    "AccessAuditModel",
]
