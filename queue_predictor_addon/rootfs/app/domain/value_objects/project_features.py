"""Project features value object.

Immutable data structure for prediction engine inputs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectFeatures:
    """Attributes of a queued project used to score withdrawal risk.

    No validation happens here: the engine accepts any values and unknown
    enum members fall back to neutral adjustments. Form constraints are
    enforced by ProjectSubmission.

    Attributes:
        phase: Study phase ordinal (0..4)
        tech_type: Technology (Solar, Wind, Battery, Hybrid, Gas, Other)
        zone: Grid zone code
        capacity: Nameplate capacity in MW
        poi_count: Interconnection requests at the same point of interconnection
        firm_capacity: Deliverable fraction of nameplate capacity (0..1)
        energy_community: Whether the site qualifies as an energy community
        behind_meter: Whether the project interconnects behind the meter
        days_in_queue: Elapsed queue time in days
    """

    phase: int
    tech_type: str
    zone: str
    capacity: float
    poi_count: int
    firm_capacity: float
    energy_community: bool = False
    behind_meter: bool = False
    days_in_queue: int = 0

    def to_dict(self) -> dict:
        """Serialize using the camelCase keys of the web form."""
        return {
            "phase": self.phase,
            "techType": self.tech_type,
            "zone": self.zone,
            "capacity": self.capacity,
            "poiCount": self.poi_count,
            "firmCapacity": self.firm_capacity,
            "energyCommunity": self.energy_community,
            "behindMeter": self.behind_meter,
            "daysInQueue": self.days_in_queue,
        }
