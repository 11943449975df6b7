from types import MappingProxyType
from typing import Mapping

from app.schemas.common import AgentLevel, ProspectOrigin
from app.schemas.conversion import ConversionRates

RateTable = Mapping[AgentLevel, Mapping[ProspectOrigin, ConversionRates]]


CONVERSION_RATES_BY_LEVEL: RateTable = MappingProxyType(
    {
        AgentLevel.INITIAL: MappingProxyType(
            {
                ProspectOrigin.REFERRED: ConversionRates(
                    appraisals=59, listings=60, reservations=45, closings=10
                ),
                ProspectOrigin.COLD_BASE: ConversionRates(
                    appraisals=14, listings=29, reservations=43, closings=1
                ),
            }
        ),
        AgentLevel.INTERMEDIATE: MappingProxyType(
            {
                ProspectOrigin.REFERRED: ConversionRates(
                    appraisals=65, listings=70, reservations=50, closings=18
                ),
                ProspectOrigin.COLD_BASE: ConversionRates(
                    appraisals=17, listings=35, reservations=40, closings=2
                ),
            }
        ),
        AgentLevel.EXPERT: MappingProxyType(
            {
                ProspectOrigin.REFERRED: ConversionRates(
                    appraisals=70, listings=70, reservations=65, closings=29
                ),
                # Experts do not work cold bases
                ProspectOrigin.COLD_BASE: ConversionRates(
                    appraisals=0, listings=0, reservations=0, closings=0
                ),
            }
        ),
    }
)
