from fastapi import APIRouter, Depends

from app.schemas.funnel import FunnelRequest, FunnelResponse
from app.services.funnel_projection import FunnelProjectionService
from app.api.deps import get_funnel_service

router = APIRouter(prefix="/funnel", tags=["Sales Funnel"])


@router.post("/stages", response_model=FunnelResponse)
async def funnel_stages(
    request_body: FunnelRequest,
    service: FunnelProjectionService = Depends(get_funnel_service),
) -> FunnelResponse:
    """Project prospect counts through every funnel stage."""
    stages = service.project_stages(
        request_body.prospects_referred,
        request_body.prospects_cold,
        request_body.agent_level,
    )
    return FunnelResponse(agent_level=request_body.agent_level, stages=stages)
