import logging
import math
from typing import Optional

from app.core.config import settings
from app.core.exceptions import InvalidProjectionInputError
from app.schemas.projection import ProjectionMetricsInput, ProjectionResult
from app.services.conversion_rates import (
    ConversionRateResolver,
    get_default_resolver,
)
from app.services.funnel_projection import FunnelProjectionService

logger = logging.getLogger(__name__)

_OUT_OF_RANGE = "Projected totals exceed the representable range"


class ProjectionService:
    """Turn an agent's pipeline inputs into projected closings and commission.

    The closing stage of the projected funnel drives the money figures:
    ``projected_sales_volume = closings * average_ticket`` and
    ``projected_commission = volume * commission_percentage / 100``.
    The weighted closing rate is reported alongside for display; for
    experts it still counts the cold pool (at rate 0) even though the
    funnel drops it.
    """

    def __init__(
        self,
        resolver: Optional[ConversionRateResolver] = None,
        funnel_service: Optional[FunnelProjectionService] = None,
    ) -> None:
        self._resolver = resolver if resolver is not None else get_default_resolver()
        self._funnel = (
            funnel_service
            if funnel_service is not None
            else FunnelProjectionService(self._resolver)
        )

    def project(self, metrics: ProjectionMetricsInput) -> ProjectionResult:
        if not math.isfinite(metrics.average_ticket) or metrics.average_ticket < 0:
            raise InvalidProjectionInputError("average_ticket must be a finite number >= 0")
        if not (
            math.isfinite(metrics.commission_percentage)
            and 0 <= metrics.commission_percentage <= 100
        ):
            raise InvalidProjectionInputError(
                "commission_percentage must be between 0 and 100"
            )

        level = metrics.agent_level or settings.DEFAULT_AGENT_LEVEL

        stages = self._funnel.project_stages(
            metrics.prospects_referred, metrics.prospects_cold, level
        )
        weighted_rate = self._resolver.get_weighted_closing_rate(
            metrics.prospects_referred, metrics.prospects_cold, level
        )

        projected_closings = self._funnel.closing_stage(stages).total
        try:
            sales_volume = projected_closings * metrics.average_ticket
            commission = sales_volume * metrics.commission_percentage / 100
        except OverflowError:
            raise InvalidProjectionInputError(_OUT_OF_RANGE) from None
        if not math.isfinite(commission):
            raise InvalidProjectionInputError(_OUT_OF_RANGE)

        logger.debug(
            "Projection for %s: %d closings, commission %.2f",
            level.value,
            projected_closings,
            commission,
        )
        return ProjectionResult(
            agent_level=level,
            start_date=metrics.start_date,
            end_date=metrics.end_date,
            stages=stages,
            weighted_closing_rate=weighted_rate,
            projected_closings=projected_closings,
            projected_sales_volume=round(sales_volume, 2),
            projected_commission=round(commission, 2),
        )
