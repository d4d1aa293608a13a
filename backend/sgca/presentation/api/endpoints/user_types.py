"""User type catalog endpoints (``/api/tipos-usuario``)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from sgca.application.schemas import (
    ApiResponse,
    PageResponse,
    UserTypeCreate,
    UserTypeResponse,
    UserTypeStatistics,
    UserTypeUpdate,
)
from sgca.application.services import UserTypeService
from sgca.domain.entities import PageRequest, UserTypeState
from sgca.infrastructure.dependencies import get_user_type_service
from sgca.presentation.api.pagination import page_params

router = APIRouter(prefix="/tipos-usuario", tags=["Tipos de Usuario"])


@router.post("", response_model=ApiResponse[UserTypeResponse], status_code=status.HTTP_201_CREATED)
async def create_user_type(
    data: UserTypeCreate,
    service: UserTypeService = Depends(get_user_type_service),
) -> ApiResponse[UserTypeResponse]:
    user_type = await service.create_user_type(data)
    return ApiResponse(
        message="Tipo de usuario creado exitosamente",
        data=UserTypeResponse.model_validate(user_type, from_attributes=True),
    )


@router.get("", response_model=ApiResponse[PageResponse[UserTypeResponse]])
@router.get("/paginado", response_model=ApiResponse[PageResponse[UserTypeResponse]])
async def page_user_types(
    page_request: PageRequest = Depends(page_params),
    nombre: str | None = Query(None),
    aplicacion_id: UUID | None = Query(None, alias="aplicacionId"),
    estado: UserTypeState | None = Query(None),
    service: UserTypeService = Depends(get_user_type_service),
) -> ApiResponse[PageResponse[UserTypeResponse]]:
    """Active user types; the optional filters combine with AND."""
    page = await service.page_user_types(
        page_request, name=nombre, application_id=aplicacion_id, state=estado
    )
    content = [UserTypeResponse.model_validate(u, from_attributes=True) for u in page.content]
    return ApiResponse(
        message="Página de tipos de usuario obtenida exitosamente",
        data=PageResponse.from_page(page, content),
    )


@router.get("/estadisticas", response_model=ApiResponse[UserTypeStatistics])
async def user_type_statistics(
    aplicacion_id: UUID | None = Query(None, alias="aplicacionId"),
    estado: UserTypeState | None = Query(None),
    service: UserTypeService = Depends(get_user_type_service),
) -> ApiResponse[UserTypeStatistics]:
    counts = await service.statistics(aplicacion_id, estado)
    statistics = UserTypeStatistics(
        total_user_types=counts["total_active"],
        user_types_by_application=counts["total_for_application"],
        user_types_by_state=counts["total_for_state"],
    )
    return ApiResponse(message="Estadísticas obtenidas exitosamente", data=statistics)


@router.get("/{user_type_id}", response_model=ApiResponse[UserTypeResponse])
async def get_user_type(
    user_type_id: UUID,
    service: UserTypeService = Depends(get_user_type_service),
) -> ApiResponse[UserTypeResponse]:
    user_type = await service.get_user_type(user_type_id)
    return ApiResponse(
        message="Tipo de usuario encontrado",
        data=UserTypeResponse.model_validate(user_type, from_attributes=True),
    )


@router.put("/{user_type_id}", response_model=ApiResponse[UserTypeResponse])
async def update_user_type(
    user_type_id: UUID,
    data: UserTypeUpdate,
    service: UserTypeService = Depends(get_user_type_service),
) -> ApiResponse[UserTypeResponse]:
    user_type = await service.update_user_type(user_type_id, data)
    return ApiResponse(
        message="Tipo de usuario actualizado exitosamente",
        data=UserTypeResponse.model_validate(user_type, from_attributes=True),
    )


@router.delete("/{user_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_type(
    user_type_id: UUID,
    service: UserTypeService = Depends(get_user_type_service),
) -> None:
    await service.delete_user_type(user_type_id)


@router.post("/{user_type_id}/restaurar", response_model=ApiResponse[UserTypeResponse])
async def restore_user_type(
    user_type_id: UUID,
    service: UserTypeService = Depends(get_user_type_service),
) -> ApiResponse[UserTypeResponse]:
    user_type = await service.restore_user_type(user_type_id)
    return ApiResponse(
        message="Tipo de usuario restaurado exitosamente",
        data=UserTypeResponse.model_validate(user_type, from_attributes=True),
    )


@router.patch("/{user_type_id}/estado", response_model=ApiResponse[UserTypeResponse])
async def change_user_type_state(
    user_type_id: UUID,
    estado: UserTypeState = Query(...),
    service: UserTypeService = Depends(get_user_type_service),
) -> ApiResponse[UserTypeResponse]:
    user_type = await service.change_state(user_type_id, estado)
    return ApiResponse(
        message="Estado del tipo de usuario cambiado exitosamente",
        data=UserTypeResponse.model_validate(user_type, from_attributes=True),
    )
