"""Sales-funnel schemas."""

from typing import List

from pydantic import BaseModel, Field

from app.schemas.common import AgentLevel, FunnelStageName


class FunnelStage(BaseModel):
    id: int = Field(..., ge=1)
    stage: FunnelStageName
    label: str
    clients_referred: int = Field(..., ge=0)
    clients_cold: int = Field(..., ge=0)
    total: int = Field(..., ge=0)


class FunnelRequest(BaseModel):
    """Request body for POST /api/v1/funnel/stages."""

    prospects_referred: int = Field(..., ge=0)
    prospects_cold: int = Field(..., ge=0)
    agent_level: AgentLevel = AgentLevel.INITIAL


class FunnelResponse(BaseModel):
    agent_level: AgentLevel
    stages: List[FunnelStage]
