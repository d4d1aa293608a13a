"""Application catalog endpoints (``/api/aplicaciones``)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from sgca.application.schemas import (
    ApiResponse,
    ApplicationCreate,
    ApplicationResponse,
    ApplicationStatistics,
    ApplicationSummary,
    ApplicationUpdate,
    PageResponse,
)
from sgca.application.services import ApplicationService
from sgca.domain.entities import ApplicationState, PageRequest
from sgca.infrastructure.dependencies import get_application_service
from sgca.presentation.api.pagination import page_params

router = APIRouter(prefix="/aplicaciones", tags=["Aplicaciones"])


def _summaries(applications) -> list[ApplicationSummary]:
    return [ApplicationSummary.model_validate(a, from_attributes=True) for a in applications]


@router.post(
    "",
    response_model=ApiResponse[ApplicationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_application(
    data: ApplicationCreate,
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[ApplicationResponse]:
    """Register a new application."""
    application = await service.create_application(data)
    return ApiResponse(
        message="Aplicación creada exitosamente",
        data=ApplicationResponse.model_validate(application, from_attributes=True),
    )


@router.get("", response_model=ApiResponse[list[ApplicationSummary]])
async def list_applications(
    nombre: str | None = Query(None, description="Texto a buscar en el nombre"),
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[list[ApplicationSummary]]:
    """Active applications in state ACTIVO, optionally filtered by name."""
    if nombre is not None:
        applications = await service.search_by_name(nombre)
    else:
        applications = await service.list_active_applications()
    return ApiResponse(message="Lista de aplicaciones obtenida exitosamente", data=_summaries(applications))


@router.get("/paginado", response_model=ApiResponse[PageResponse[ApplicationSummary]])
async def page_applications(
    page_request: PageRequest = Depends(page_params),
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[PageResponse[ApplicationSummary]]:
    page = await service.page_active_applications(page_request)
    return ApiResponse(
        message="Aplicaciones paginadas obtenidas exitosamente",
        data=PageResponse.from_page(page, _summaries(page.content)),
    )


@router.get("/buscar", response_model=ApiResponse[list[ApplicationSummary]])
async def search_applications(
    nombre: str = Query(..., description="Texto a buscar en el nombre"),
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[list[ApplicationSummary]]:
    applications = await service.search_by_name(nombre)
    return ApiResponse(message="Búsqueda completada exitosamente", data=_summaries(applications))


@router.get("/contar", response_model=ApiResponse[int])
async def count_applications(
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[int]:
    return ApiResponse(message="Conteo obtenido exitosamente", data=await service.count_active())


@router.get("/estadisticas", response_model=ApiResponse[ApplicationStatistics])
async def application_statistics(
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[ApplicationStatistics]:
    statistics = ApplicationStatistics(total_active=await service.count_active())
    return ApiResponse(message="Estadísticas obtenidas exitosamente", data=statistics)


@router.get("/llave/{identifier_key}", response_model=ApiResponse[ApplicationResponse])
async def get_application_by_key(
    identifier_key: str,
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[ApplicationResponse]:
    application = await service.get_by_identifier_key(identifier_key)
    return ApiResponse(
        message="Aplicación encontrada",
        data=ApplicationResponse.model_validate(application, from_attributes=True),
    )


@router.get("/existe/{identifier_key}", response_model=ApiResponse[bool])
async def application_exists(
    identifier_key: str,
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[bool]:
    exists = await service.exists_by_identifier_key(identifier_key)
    message = "La aplicación existe" if exists else "La aplicación no existe"
    return ApiResponse(message=message, data=exists)


@router.get("/{application_id}", response_model=ApiResponse[ApplicationResponse])
async def get_application(
    application_id: UUID,
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[ApplicationResponse]:
    application = await service.get_application(application_id)
    return ApiResponse(
        message="Aplicación encontrada",
        data=ApplicationResponse.model_validate(application, from_attributes=True),
    )


@router.put("/{application_id}", response_model=ApiResponse[ApplicationResponse])
async def update_application(
    application_id: UUID,
    data: ApplicationUpdate,
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[ApplicationResponse]:
    application = await service.update_application(application_id, data)
    return ApiResponse(
        message="Aplicación actualizada exitosamente",
        data=ApplicationResponse.model_validate(application, from_attributes=True),
    )


@router.delete("/{application_id}", response_model=ApiResponse[None])
async def delete_application(
    application_id: UUID,
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[None]:
    await service.delete_application(application_id)
    return ApiResponse(message="Aplicación eliminada exitosamente")


@router.post("/{application_id}/restaurar", response_model=ApiResponse[ApplicationResponse])
@router.patch("/{application_id}/restaurar", response_model=ApiResponse[ApplicationResponse])
async def restore_application(
    application_id: UUID,
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[ApplicationResponse]:
    application = await service.restore_application(application_id)
    return ApiResponse(
        message="Aplicación restaurada exitosamente",
        data=ApplicationResponse.model_validate(application, from_attributes=True),
    )


@router.patch("/{application_id}/estado", response_model=ApiResponse[ApplicationResponse])
async def change_application_state(
    application_id: UUID,
    estado: ApplicationState = Query(..., description="Nuevo estado"),
    service: ApplicationService = Depends(get_application_service),
) -> ApiResponse[ApplicationResponse]:
    application = await service.change_state(application_id, estado)
    return ApiResponse(
        message="Estado cambiado exitosamente",
        data=ApplicationResponse.model_validate(application, from_attributes=True),
    )
