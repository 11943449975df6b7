from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.rate_limit import limiter
from app.schemas.projection import ProjectionMetricsInput, ProjectionResult
from app.services.projection_service import ProjectionService
from app.api.deps import get_projection_service

router = APIRouter(prefix="/projections", tags=["Projections"])


@router.post("", response_model=ProjectionResult)
@limiter.limit(settings.PROJECTION_RATE_LIMIT)
async def project_metrics(
    request: Request,
    request_body: ProjectionMetricsInput,
    service: ProjectionService = Depends(get_projection_service),
) -> ProjectionResult:
    """Project closings, sales volume and commission for a period.

    Rate-limited per IP (``PROJECTION_RATE_LIMIT``).  Nothing is stored;
    the projection is recomputed on every call.
    """
    return service.project(request_body)
