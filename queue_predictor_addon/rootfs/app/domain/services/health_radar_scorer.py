"""Health radar scorer service.

Domain service scoring six project health dimensions on a 0-100 scale.
"""

from types import MappingProxyType
from typing import Mapping

from domain.value_objects import ProjectFeatures, RadarDimension

from .display_rounding import round_half_up

# Site and zone-centroid latitudes are not inputs yet, so the location
# score is a constant.
SITE_LATITUDE = 31.5
ZONE_CENTROID_LATITUDE = 31.0
LATITUDE_TOLERANCE = 5

ZONE_HEALTH: Mapping[str, int] = MappingProxyType(
    {"WEST": 45, "PANHANDLE": 55, "SOUTH": 75}
)
DEFAULT_ZONE_HEALTH = 70

ENERGY_COMMUNITY_BONUS = 90
NO_ENERGY_COMMUNITY_BONUS = 40


class HealthRadarScorer:
    """Map project features to radar chart dimensions.

    Values are nominally 0..100 but only Capacity and POI Avail are
    floored at 0; nothing is capped.
    """

    def score(self, features: ProjectFeatures) -> tuple[RadarDimension, ...]:
        """Compute the six health dimensions.

        Args:
            features: Project features

        Returns:
            Location, Capacity, Phase, POI Avail, Zone and IRA Bonus scores
        """
        location = round_half_up(
            (1 - abs(SITE_LATITUDE - ZONE_CENTROID_LATITUDE) / LATITUDE_TOLERANCE) * 100
        )
        return (
            RadarDimension("Location", location),
            RadarDimension("Capacity", round_half_up(max(0, 100 - features.capacity * 0.3))),
            RadarDimension("Phase", round_half_up(features.phase / 4 * 100)),
            RadarDimension("POI Avail", round_half_up(max(0, 100 - features.poi_count * 6))),
            RadarDimension("Zone", ZONE_HEALTH.get(features.zone, DEFAULT_ZONE_HEALTH)),
            RadarDimension(
                "IRA Bonus",
                ENERGY_COMMUNITY_BONUS if features.energy_community else NO_ENERGY_COMMUNITY_BONUS,
            ),
        )
