from app.services.conversion_rates import (
    ConversionRateResolver,
    get_default_resolver,
)
from app.services.funnel_projection import FunnelProjectionService
from app.services.projection_service import ProjectionService


# ---------------------------------------------------------------------------
# Service factory functions
# ---------------------------------------------------------------------------


def get_conversion_rate_resolver() -> ConversionRateResolver:
    """Shared resolver over the static rate table."""
    return get_default_resolver()


def get_funnel_service() -> FunnelProjectionService:
    return FunnelProjectionService(get_conversion_rate_resolver())


def get_projection_service() -> ProjectionService:
    resolver = get_conversion_rate_resolver()
    return ProjectionService(
        resolver=resolver,
        funnel_service=FunnelProjectionService(resolver),
    )
