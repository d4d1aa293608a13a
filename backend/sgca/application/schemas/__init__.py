from .common import (
    ApiErrorResponse,
    ApiResponse,
    PageResponse,
    WireModel,
    field_name,
    wire_name,
)
from .application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationStatistics,
    ApplicationSummary,
    ApplicationUpdate,
)
from .section import (
    NameAvailability,
    SectionCreate,
    SectionResponse,
    SectionStatistics,
    SectionSummary,
    SectionUpdate,
)
from .action import (
    ActionCreate,
    ActionResponse,
    ActionStatistics,
    ActionSummary,
    ActionUpdate,
)
from .user_type import (
    UserTypeCreate,
    UserTypeResponse,
    UserTypeStatistics,
    UserTypeUpdate,
)

__all__ = [
    "ApiErrorResponse",
    "ApiResponse",
    "PageResponse",
    "WireModel",
    "field_name",
    "wire_name",
    "ApplicationCreate",
    "ApplicationResponse",
    "ApplicationStatistics",
    "ApplicationSummary",
    "ApplicationUpdate",
    "NameAvailability",
    "SectionCreate",
    "SectionResponse",
    "SectionStatistics",
    "SectionSummary",
    "SectionUpdate",
    "ActionCreate",
    "ActionResponse",
    "ActionStatistics",
    "ActionSummary",
    "ActionUpdate",
    "UserTypeCreate",
    "UserTypeResponse",
    "UserTypeStatistics",
    "UserTypeUpdate",
]
