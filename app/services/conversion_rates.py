import logging
from typing import Optional, Union

from app.core.constants import VALID_AGENT_LEVELS, VALID_PROSPECT_ORIGINS
from app.core.conversion_rates import CONVERSION_RATES_BY_LEVEL, RateTable
from app.core.exceptions import (
    InvalidAgentLevelError,
    InvalidProspectCountError,
    InvalidProspectOriginError,
)
from app.schemas.common import AgentLevel, ProspectOrigin
from app.schemas.conversion import ConversionRates

logger = logging.getLogger(__name__)

AgentLevelLike = Union[AgentLevel, str]
ProspectOriginLike = Union[ProspectOrigin, str]


def coerce_agent_level(value: AgentLevelLike) -> AgentLevel:
    """Return ``value`` as an :class:`AgentLevel`, accepting its string form."""
    try:
        return AgentLevel(value)
    except ValueError:
        raise InvalidAgentLevelError(
            f"Unknown agent level {value!r}; expected one of "
            f"{', '.join(sorted(VALID_AGENT_LEVELS))}"
        ) from None


def coerce_prospect_origin(value: ProspectOriginLike) -> ProspectOrigin:
    """Return ``value`` as a :class:`ProspectOrigin`, accepting its string form."""
    try:
        return ProspectOrigin(value)
    except ValueError:
        raise InvalidProspectOriginError(
            f"Unknown prospect origin {value!r}; expected one of "
            f"{', '.join(sorted(VALID_PROSPECT_ORIGINS))}"
        ) from None


def validate_count(name: str, value: int) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidProspectCountError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidProspectCountError(f"{name} must be >= 0, got {value}")
    return value


def round_ratio(numerator: int, denominator: int) -> int:
    """Round ``numerator / denominator`` to the nearest integer, ties upward.

    Both operands are non-negative, so ties-upward is the same as
    half-away-from-zero.  Integer arithmetic keeps the .5 boundary exact.
    """
    return (2 * numerator + denominator) // (2 * denominator)


class ConversionRateResolver:
    """Resolve funnel closing rates by prospect origin and agent level.

    Backed by a read-only rate table (the static
    ``CONVERSION_RATES_BY_LEVEL`` unless another is injected).  Every
    method is a pure function of its arguments and the table, so a single
    instance is safely shared across requests and threads.
    """

    def __init__(self, table: Optional[RateTable] = None) -> None:
        self._table: RateTable = table if table is not None else CONVERSION_RATES_BY_LEVEL

    @property
    def table(self) -> RateTable:
        return self._table

    def get_stage_rates(
        self, origin: ProspectOriginLike, level: AgentLevelLike
    ) -> ConversionRates:
        """Return the full rate record for one (origin, level) cell."""
        origin = coerce_prospect_origin(origin)
        level = coerce_agent_level(level)
        return self._table[level][origin]

    def get_closing_rate(
        self, origin: ProspectOriginLike, level: AgentLevelLike
    ) -> int:
        """Closing-rate percentage for prospects of ``origin`` worked at ``level``.

        Expert agents are not modelled as working cold bases, so that
        pair is 0 whatever the table holds.
        """
        origin = coerce_prospect_origin(origin)
        level = coerce_agent_level(level)

        if level is AgentLevel.EXPERT and origin is ProspectOrigin.COLD_BASE:
            return 0

        return self._table[level][origin].closings

    def get_weighted_closing_rate(
        self,
        referred_count: int,
        cold_base_count: int,
        level: AgentLevelLike,
    ) -> int:
        """Closing rate blended across a mixed pool, weighted by lead counts.

        An empty pool yields 0.  The blend is rounded half away from zero,
        so ``(5, 5, "inicial")`` gives 6.
        """
        validate_count("referred_count", referred_count)
        validate_count("cold_base_count", cold_base_count)
        level = coerce_agent_level(level)

        total = referred_count + cold_base_count
        if total == 0:
            return 0

        referred_rate = self.get_closing_rate(ProspectOrigin.REFERRED, level)
        cold_base_rate = self.get_closing_rate(ProspectOrigin.COLD_BASE, level)

        weighted = round_ratio(
            referred_count * referred_rate + cold_base_count * cold_base_rate,
            total,
        )
        logger.debug(
            "Weighted closing rate for %s (referred=%d, cold=%d): %d%%",
            level.value,
            referred_count,
            cold_base_count,
            weighted,
        )
        return weighted


_default_resolver = ConversionRateResolver()


def get_default_resolver() -> ConversionRateResolver:
    return _default_resolver


def get_closing_rate(origin: ProspectOriginLike, level: AgentLevelLike) -> int:
    return _default_resolver.get_closing_rate(origin, level)


def get_weighted_closing_rate(
    referred_count: int, cold_base_count: int, level: AgentLevelLike
) -> int:
    return _default_resolver.get_weighted_closing_rate(
        referred_count, cold_base_count, level
    )
