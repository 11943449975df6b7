"""Pydantic schemas package – re-exports for convenience."""

# Common enums
from app.schemas.common import (
    AgentLevel as AgentLevel,
    ProspectOrigin as ProspectOrigin,
    FunnelStageName as FunnelStageName,
)

# Conversion-rate schemas
from app.schemas.conversion import (
    ConversionRates as ConversionRates,
    ConversionRateTableResponse as ConversionRateTableResponse,
    ClosingRateResponse as ClosingRateResponse,
    WeightedClosingRateResponse as WeightedClosingRateResponse,
)

# Funnel schemas
from app.schemas.funnel import (
    FunnelStage as FunnelStage,
    FunnelRequest as FunnelRequest,
    FunnelResponse as FunnelResponse,
)

# Projection schemas
from app.schemas.projection import (
    ProjectionMetricsInput as ProjectionMetricsInput,
    ProjectionResult as ProjectionResult,
)
