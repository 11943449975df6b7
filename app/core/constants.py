from typing import Dict, FrozenSet, List

from app.schemas.common import AgentLevel, FunnelStageName, ProspectOrigin

VALID_AGENT_LEVELS: FrozenSet[str] = frozenset(level.value for level in AgentLevel)
VALID_PROSPECT_ORIGINS: FrozenSet[str] = frozenset(o.value for o in ProspectOrigin)

# Funnel stages in pipeline order
FUNNEL_STAGE_ORDER: List[FunnelStageName] = [
    FunnelStageName.PROSPECTS,
    FunnelStageName.APPRAISALS,
    FunnelStageName.LISTINGS,
    FunnelStageName.RESERVATIONS,
    FunnelStageName.CLOSINGS,
]

FUNNEL_STAGE_LABELS: Dict[FunnelStageName, str] = {
    FunnelStageName.PROSPECTS: "Prospectos",
    FunnelStageName.APPRAISALS: "Tasaciones",
    FunnelStageName.LISTINGS: "Captaciones",
    FunnelStageName.RESERVATIONS: "Reservas",
    FunnelStageName.CLOSINGS: "Cierres",
}
