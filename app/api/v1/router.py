from fastapi import APIRouter

from app.api.v1.endpoints import conversion_rates, funnel, projections, health

router = APIRouter(prefix="/api/v1")

router.include_router(conversion_rates.router)
router.include_router(funnel.router)
router.include_router(projections.router)
router.include_router(health.router)
