"""Top-level API router — includes the catalog routers."""

from fastapi import APIRouter

from sgca.presentation.api.endpoints.health import router as health_router
from sgca.presentation.api.endpoints.applications import router as applications_router
from sgca.presentation.api.endpoints.sections import router as sections_router
from sgca.presentation.api.endpoints.actions import router as actions_router
from sgca.presentation.api.endpoints.user_types import router as user_types_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(applications_router)
router.include_router(sections_router)
router.include_router(actions_router)
router.include_router(user_types_router)
