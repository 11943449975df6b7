import logging
from typing import List, Optional

from app.core.constants import FUNNEL_STAGE_LABELS, FUNNEL_STAGE_ORDER
from app.schemas.common import AgentLevel, FunnelStageName, ProspectOrigin
from app.schemas.funnel import FunnelStage
from app.services.conversion_rates import (
    AgentLevelLike,
    ConversionRateResolver,
    coerce_agent_level,
    get_default_resolver,
    round_ratio,
    validate_count,
)

logger = logging.getLogger(__name__)


def _apply_rate(count: int, rate: int) -> int:
    return round_ratio(count * rate, 100)


class FunnelProjectionService:
    """Project how many prospects reach each sales-funnel stage.

    Appraisals, listings and reservations each apply their rate to the
    previous stage's count.  Closings apply the final closing rate to the
    original prospect count, which keeps the closing stage consistent with
    the resolver's closing rate and with the commission projection.
    """

    def __init__(self, resolver: Optional[ConversionRateResolver] = None) -> None:
        self._resolver = resolver if resolver is not None else get_default_resolver()

    def _project_origin(
        self, prospects: int, origin: ProspectOrigin, level: AgentLevel
    ) -> List[int]:
        rates = self._resolver.get_stage_rates(origin, level)
        appraisals = _apply_rate(prospects, rates.appraisals)
        listings = _apply_rate(appraisals, rates.listings)
        reservations = _apply_rate(listings, rates.reservations)
        closings = _apply_rate(
            prospects, self._resolver.get_closing_rate(origin, level)
        )
        return [prospects, appraisals, listings, reservations, closings]

    def project_stages(
        self,
        prospects_referred: int,
        prospects_cold: int,
        level: AgentLevelLike,
    ) -> List[FunnelStage]:
        validate_count("prospects_referred", prospects_referred)
        validate_count("prospects_cold", prospects_cold)
        level = coerce_agent_level(level)

        # Experts don't work cold bases: their cold pool never enters the funnel
        cold = 0 if level is AgentLevel.EXPERT else prospects_cold

        referred_counts = self._project_origin(
            prospects_referred, ProspectOrigin.REFERRED, level
        )
        cold_counts = self._project_origin(cold, ProspectOrigin.COLD_BASE, level)

        stages = [
            FunnelStage(
                id=index,
                stage=stage,
                label=FUNNEL_STAGE_LABELS[stage],
                clients_referred=referred,
                clients_cold=cold_count,
                total=referred + cold_count,
            )
            for index, (stage, referred, cold_count) in enumerate(
                zip(FUNNEL_STAGE_ORDER, referred_counts, cold_counts), start=1
            )
        ]
        logger.debug(
            "Projected funnel for %s: %s",
            level.value,
            {s.stage.value: s.total for s in stages},
        )
        return stages

    @staticmethod
    def closing_stage(stages: List[FunnelStage]) -> FunnelStage:
        return next(s for s in stages if s.stage is FunnelStageName.CLOSINGS)
