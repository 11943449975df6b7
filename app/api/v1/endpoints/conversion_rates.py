from fastapi import APIRouter, Depends, Query

from app.schemas.common import AgentLevel, ProspectOrigin
from app.schemas.conversion import (
    ClosingRateResponse,
    ConversionRateTableResponse,
    WeightedClosingRateResponse,
)
from app.services.conversion_rates import ConversionRateResolver
from app.api.deps import get_conversion_rate_resolver

router = APIRouter(prefix="/conversion-rates", tags=["Conversion Rates"])


@router.get("", response_model=ConversionRateTableResponse)
async def conversion_rate_table(
    resolver: ConversionRateResolver = Depends(get_conversion_rate_resolver),
) -> ConversionRateTableResponse:
    """Full stage-rate table by agent level and prospect origin."""
    return ConversionRateTableResponse(
        rates={
            level: dict(by_origin) for level, by_origin in resolver.table.items()
        }
    )


@router.get("/closing-rate", response_model=ClosingRateResponse)
async def closing_rate(
    origin: ProspectOrigin = Query(..., description="Prospect origin"),
    level: AgentLevel = Query(..., description="Agent level"),
    resolver: ConversionRateResolver = Depends(get_conversion_rate_resolver),
) -> ClosingRateResponse:
    """Closing rate for a single origin and agent level."""
    return ClosingRateResponse(
        origin=origin,
        level=level,
        closing_rate=resolver.get_closing_rate(origin, level),
    )


@router.get("/weighted-closing-rate", response_model=WeightedClosingRateResponse)
async def weighted_closing_rate(
    referred_count: int = Query(..., ge=0, description="Referred prospects"),
    cold_base_count: int = Query(..., ge=0, description="Cold-base prospects"),
    level: AgentLevel = Query(..., description="Agent level"),
    resolver: ConversionRateResolver = Depends(get_conversion_rate_resolver),
) -> WeightedClosingRateResponse:
    """Closing rate blended across a mixed prospect pool."""
    return WeightedClosingRateResponse(
        referred_count=referred_count,
        cold_base_count=cold_base_count,
        level=level,
        weighted_closing_rate=resolver.get_weighted_closing_rate(
            referred_count, cold_base_count, level
        ),
    )
