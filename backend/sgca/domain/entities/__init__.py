from .base import BaseEntity
from .application import Application, ApplicationState
from .section import Section
from .action import Action
from .user_type import UserType, UserTypeState
from .pagination import DEFAULT_SORT, Page, PageRequest, SortDirection, SortOrder

__all__ = [
    "BaseEntity",
    "Application",
    "ApplicationState",
    "Section",
    "Action",
    "UserType",
    "UserTypeState",
    "DEFAULT_SORT",
    "Page",
    "PageRequest",
    "SortDirection",
    "SortOrder",
]
