import pytest
from pydantic import ValidationError

from app.core.constants import (
    FUNNEL_STAGE_LABELS,
    FUNNEL_STAGE_ORDER,
    VALID_AGENT_LEVELS,
    VALID_PROSPECT_ORIGINS,
)
from app.core.conversion_rates import CONVERSION_RATES_BY_LEVEL
from app.schemas.common import AgentLevel, FunnelStageName, ProspectOrigin


class TestConstantsConsistency:
    """Verify that constants, enums, and the rate table stay in sync."""

    def test_agent_levels_match_enum(self):
        """Every AgentLevel value must appear in VALID_AGENT_LEVELS."""
        assert VALID_AGENT_LEVELS == {"inicial", "intermedio", "experto"}
        for member in AgentLevel:
            assert member.value in VALID_AGENT_LEVELS

    def test_prospect_origins_match_enum(self):
        assert VALID_PROSPECT_ORIGINS == {"referidos", "bases_frias"}

    def test_every_stage_has_a_label_and_a_position(self):
        assert set(FUNNEL_STAGE_ORDER) == set(FunnelStageName)
        assert set(FUNNEL_STAGE_LABELS) == set(FunnelStageName)

    def test_stage_order_starts_with_prospects_and_ends_with_closings(self):
        assert FUNNEL_STAGE_ORDER[0] is FunnelStageName.PROSPECTS
        assert FUNNEL_STAGE_ORDER[-1] is FunnelStageName.CLOSINGS


class TestRateTable:
    """The static table is fully populated and within percentage bounds."""

    def test_table_covers_every_level_and_origin(self):
        assert set(CONVERSION_RATES_BY_LEVEL) == set(AgentLevel)
        for by_origin in CONVERSION_RATES_BY_LEVEL.values():
            assert set(by_origin) == set(ProspectOrigin)

    def test_all_rates_are_percentages(self):
        for by_origin in CONVERSION_RATES_BY_LEVEL.values():
            for rates in by_origin.values():
                for value in rates.model_dump().values():
                    assert 0 <= value <= 100

    def test_expert_cold_base_is_all_zero(self):
        """Experts do not work cold bases: the whole record is zero."""
        rates = CONVERSION_RATES_BY_LEVEL[AgentLevel.EXPERT][ProspectOrigin.COLD_BASE]
        assert rates.model_dump() == {
            "appraisals": 0,
            "listings": 0,
            "reservations": 0,
            "closings": 0,
        }

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CONVERSION_RATES_BY_LEVEL[AgentLevel.INITIAL] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            CONVERSION_RATES_BY_LEVEL[AgentLevel.INITIAL][  # type: ignore[index]
                ProspectOrigin.REFERRED
            ] = None

    def test_rate_records_are_frozen(self):
        rates = CONVERSION_RATES_BY_LEVEL[AgentLevel.INITIAL][ProspectOrigin.REFERRED]
        with pytest.raises(ValidationError):
            rates.closings = 99
