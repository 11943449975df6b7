"""Conversion-rate schemas (rate records and lookup responses)."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.common import AgentLevel, ProspectOrigin


class ConversionRates(BaseModel):
    """Advance-rate percentages for one (level, origin) cell.

    ``appraisals``, ``listings`` and ``reservations`` are rates over the
    previous stage.  ``closings`` is a final rate measured from the
    prospect count.
    """

    model_config = ConfigDict(frozen=True)

    appraisals: int = Field(..., ge=0, le=100)
    listings: int = Field(..., ge=0, le=100)
    reservations: int = Field(..., ge=0, le=100)
    closings: int = Field(..., ge=0, le=100)


class ConversionRateTableResponse(BaseModel):
    rates: Dict[AgentLevel, Dict[ProspectOrigin, ConversionRates]]


class ClosingRateResponse(BaseModel):
    origin: ProspectOrigin
    level: AgentLevel
    closing_rate: int = Field(..., ge=0, le=100)


class WeightedClosingRateResponse(BaseModel):
    referred_count: int = Field(..., ge=0)
    cold_base_count: int = Field(..., ge=0)
    level: AgentLevel
    weighted_closing_rate: int = Field(..., ge=0, le=100)
