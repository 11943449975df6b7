"""Projection-metrics schemas (request and computed result)."""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator
from typing_extensions import Self

from app.schemas.common import AgentLevel
from app.schemas.funnel import FunnelStage


# Ceilings that keep projected money totals finite
_MAX_AVERAGE_TICKET = 1_000_000_000_000
_MAX_PROSPECTS = 10_000_000


class ProjectionMetricsInput(BaseModel):
    """Pipeline inputs submitted by an agent for a projection period."""

    prospects_referred: int = Field(..., ge=0, le=_MAX_PROSPECTS)
    prospects_cold: int = Field(..., ge=0, le=_MAX_PROSPECTS)
    average_ticket: float = Field(
        ...,
        ge=0,
        le=_MAX_AVERAGE_TICKET,
        allow_inf_nan=False,
        description="Average sale price",
    )
    commission_percentage: float = Field(..., ge=0, le=100, allow_inf_nan=False)
    agent_level: Optional[AgentLevel] = Field(
        None, description="Defaults to the configured DEFAULT_AGENT_LEVEL"
    )
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def validate_period(self) -> Self:
        """Reject periods that end before they start."""
        if self.start_date is not None and self.end_date is not None:
            if self.end_date < self.start_date:
                raise ValueError(
                    f"end_date ({self.end_date}) must not be earlier than "
                    f"start_date ({self.start_date})"
                )
        return self


class ProjectionResult(BaseModel):
    agent_level: AgentLevel
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    stages: List[FunnelStage]
    weighted_closing_rate: int = Field(..., ge=0, le=100)
    projected_closings: int = Field(..., ge=0)
    projected_sales_volume: float = Field(..., ge=0)
    projected_commission: float = Field(..., ge=0)
