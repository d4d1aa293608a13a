"""Section catalog endpoints (``/api/secciones``)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from sgca.application.schemas import (
    ApiResponse,
    NameAvailability,
    PageResponse,
    SectionCreate,
    SectionResponse,
    SectionStatistics,
    SectionSummary,
    SectionUpdate,
)
from sgca.application.services import SectionService
from sgca.domain.entities import PageRequest
from sgca.infrastructure.dependencies import get_section_service
from sgca.presentation.api.pagination import page_params

router = APIRouter(prefix="/secciones", tags=["Secciones"])


@router.post("", response_model=ApiResponse[SectionResponse], status_code=status.HTTP_201_CREATED)
async def create_section(
    data: SectionCreate,
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[SectionResponse]:
    section = await service.create_section(data)
    return ApiResponse(message="Sección creada exitosamente", data=SectionResponse.from_entity(section))


@router.get("", response_model=ApiResponse[list[SectionSummary]])
async def list_sections(
    nombre: str | None = Query(None, description="Filtrar por nombre"),
    texto: str | None = Query(None, description="Buscar en nombre y descripción"),
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[list[SectionSummary]]:
    """Active sections; ``nombre`` takes precedence over ``texto``."""
    if nombre and nombre.strip():
        sections = await service.search_by_name(nombre.strip())
    elif texto and texto.strip():
        sections = await service.search_by_text(texto.strip())
    else:
        sections = await service.list_sections()
    return ApiResponse(
        message="Lista de secciones obtenida exitosamente",
        data=[SectionSummary.from_entity(s) for s in sections],
    )


@router.get("/paginated", response_model=ApiResponse[PageResponse[SectionSummary]])
@router.get("/paginado", response_model=ApiResponse[PageResponse[SectionSummary]])
async def page_sections(
    page_request: PageRequest = Depends(page_params),
    nombre: str | None = Query(None, description="Filtrar por nombre"),
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[PageResponse[SectionSummary]]:
    page = await service.page_sections(page_request, name=nombre.strip() if nombre else None)
    return ApiResponse(
        message="Página de secciones obtenida exitosamente",
        data=PageResponse.from_page(page, [SectionSummary.from_entity(s) for s in page.content]),
    )


@router.get("/estadisticas", response_model=ApiResponse[SectionStatistics])
async def section_statistics(
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[SectionStatistics]:
    statistics = SectionStatistics(total_sections=await service.count_active())
    return ApiResponse(message="Estadísticas obtenidas exitosamente", data=statistics)


@router.get("/verificar-nombre", response_model=ApiResponse[NameAvailability])
async def check_section_name(
    nombre: str = Query(..., min_length=1, description="Nombre a verificar"),
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[NameAvailability]:
    exists = await service.exists_by_name(nombre)
    message = "El nombre ya está en uso" if exists else "El nombre está disponible"
    return ApiResponse(
        message=message,
        data=NameAvailability(name=nombre, available=not exists, exists=exists),
    )


@router.get("/{section_id}", response_model=ApiResponse[SectionResponse])
async def get_section(
    section_id: UUID,
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[SectionResponse]:
    section = await service.get_section(section_id)
    return ApiResponse(message="Sección encontrada exitosamente", data=SectionResponse.from_entity(section))


@router.put("/{section_id}", response_model=ApiResponse[SectionResponse])
async def update_section(
    section_id: UUID,
    data: SectionUpdate,
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[SectionResponse]:
    section = await service.update_section(section_id, data)
    return ApiResponse(message="Sección actualizada exitosamente", data=SectionResponse.from_entity(section))


@router.delete("/{section_id}", response_model=ApiResponse[None])
async def delete_section(
    section_id: UUID,
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[None]:
    await service.delete_section(section_id)
    return ApiResponse(message="Sección eliminada exitosamente")


@router.post("/{section_id}/restaurar", response_model=ApiResponse[SectionResponse])
async def restore_section(
    section_id: UUID,
    service: SectionService = Depends(get_section_service),
) -> ApiResponse[SectionResponse]:
    section = await service.restore_section(section_id)
    return ApiResponse(message="Sección restaurada exitosamente", data=SectionResponse.from_entity(section))
