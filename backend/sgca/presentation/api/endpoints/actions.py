"""Action catalog endpoints (``/api/acciones``)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from sgca.application.schemas import (
    ActionCreate,
    ActionResponse,
    ActionStatistics,
    ActionSummary,
    ActionUpdate,
    ApiResponse,
    PageResponse,
)
from sgca.application.services import ActionService
from sgca.domain.entities import PageRequest
from sgca.infrastructure.dependencies import get_action_service
from sgca.presentation.api.pagination import page_params

router = APIRouter(prefix="/acciones", tags=["Acciones"])


@router.post("", response_model=ApiResponse[ActionResponse], status_code=status.HTTP_201_CREATED)
async def create_action(
    data: ActionCreate,
    service: ActionService = Depends(get_action_service),
) -> ApiResponse[ActionResponse]:
    action = await service.create_action(data)
    return ApiResponse(message="Acción creada exitosamente", data=ActionResponse.from_entity(action))


@router.get("", response_model=ApiResponse[list[ActionSummary]])
async def list_actions(
    aplicacion_id: UUID | None = Query(None, alias="aplicacionId"),
    seccion_id: UUID | None = Query(None, alias="seccionId"),
    nombre: str | None = Query(None),
    texto: str | None = Query(None),
    service: ActionService = Depends(get_action_service),
) -> ApiResponse[list[ActionSummary]]:
    """Active actions.

    Only one filter applies, in this order: application and section together,
    application, section, ``nombre``, ``texto``; with none, every active action.
    """
    if aplicacion_id is not None and seccion_id is not None:
        actions = await service.list_by_application_and_section(aplicacion_id, seccion_id)
    elif aplicacion_id is not None:
        actions = await service.list_by_application(aplicacion_id)
    elif seccion_id is not None:
        actions = await service.list_by_section(seccion_id)
    elif nombre and nombre.strip():
        actions = await service.search_by_name(nombre.strip())
    elif texto and texto.strip():
        actions = await service.search_by_text(texto.strip())
    else:
        actions = await service.list_actions()
    return ApiResponse(
        message="Lista de acciones obtenida exitosamente",
        data=[ActionSummary.from_entity(a) for a in actions],
    )


@router.get("/paginado", response_model=ApiResponse[PageResponse[ActionSummary]])
async def page_actions(
    page_request: PageRequest = Depends(page_params),
    nombre: str | None = Query(None),
    aplicacion_id: UUID | None = Query(None, alias="aplicacionId"),
    seccion_id: UUID | None = Query(None, alias="seccionId"),
    service: ActionService = Depends(get_action_service),
) -> ApiResponse[PageResponse[ActionSummary]]:
    page = await service.page_actions(
        page_request,
        application_id=aplicacion_id,
        section_id=seccion_id,
        name=nombre.strip() if nombre else None,
    )
    return ApiResponse(
        message="Página de acciones obtenida exitosamente",
        data=PageResponse.from_page(page, [ActionSummary.from_entity(a) for a in page.content]),
    )


@router.get("/estadisticas", response_model=ApiResponse[ActionStatistics])
async def action_statistics(
    aplicacion_id: UUID | None = Query(None, alias="aplicacionId"),
    seccion_id: UUID | None = Query(None, alias="seccionId"),
    service: ActionService = Depends(get_action_service),
) -> ApiResponse[ActionStatistics]:
    statistics = ActionStatistics(
        total_actions=await service.count_active(),
        actions_by_application=(
            await service.count_by_application(aplicacion_id) if aplicacion_id is not None else 0
        ),
        actions_by_section=await service.count_by_section(seccion_id) if seccion_id is not None else 0,
    )
    return ApiResponse(message="Estadísticas obtenidas exitosamente", data=statistics)


@router.get("/verificar-nombre", response_model=ApiResponse[bool])
async def check_action_name(
    nombre: str = Query(..., min_length=1),
    aplicacion_id: UUID = Query(..., alias="aplicacionId"),
    seccion_id: UUID = Query(..., alias="seccionId"),
    service: ActionService = Depends(get_action_service),
) -> ApiResponse[bool]:
    """``data`` is true when the name is already used in that application and section."""
    exists = await service.exists_by_name(nombre, aplicacion_id, seccion_id)
    message = "El nombre ya está en uso" if exists else "El nombre está disponible"
    return ApiResponse(message=message, data=exists)


@router.get("/{action_id}", response_model=ApiResponse[ActionResponse])
async def get_action(
    action_id: UUID,
    service: ActionService = Depends(get_action_service),
) -> ApiResponse[ActionResponse]:
    action = await service.get_action(action_id)
    return ApiResponse(message="Acción encontrada", data=ActionResponse.from_entity(action))


@router.put("/{action_id}", response_model=ApiResponse[ActionResponse])
async def update_action(
    action_id: UUID,
    data: ActionUpdate,
    service: ActionService = Depends(get_action_service),
) -> ApiResponse[ActionResponse]:
    action = await service.update_action(action_id, data)
    return ApiResponse(message="Acción actualizada exitosamente", data=ActionResponse.from_entity(action))


@router.delete("/{action_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_action(
    action_id: UUID,
    service: ActionService = Depends(get_action_service),
) -> None:
    await service.delete_action(action_id)


@router.post("/{action_id}/restaurar", response_model=ApiResponse[ActionResponse])
async def restore_action(
    action_id: UUID,
    service: ActionService = Depends(get_action_service),
) -> ApiResponse[ActionResponse]:
    action = await service.restore_action(action_id)
    return ApiResponse(message="Acción restaurada exitosamente", data=ActionResponse.from_entity(action))
