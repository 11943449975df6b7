from enum import Enum


class AgentLevel(str, Enum):
    INITIAL = "inicial"
    INTERMEDIATE = "intermedio"
    EXPERT = "experto"


class ProspectOrigin(str, Enum):
    REFERRED = "referidos"
    COLD_BASE = "bases_frias"


class FunnelStageName(str, Enum):
    PROSPECTS = "prospectos"
    APPRAISALS = "tasaciones"
    LISTINGS = "captaciones"
    RESERVATIONS = "reservas"
    CLOSINGS = "cierres"
