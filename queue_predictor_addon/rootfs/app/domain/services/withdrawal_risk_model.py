"""Withdrawal risk model service.

Domain service computing the probability that a queued project withdraws
before reaching service.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from domain.value_objects import ProjectFeatures

from .display_rounding import clamp

logger = logging.getLogger(__name__)

MIN_WITHDRAWAL_PROBABILITY = 0.03
MAX_WITHDRAWAL_PROBABILITY = 0.97

PHASE_BASE_RISK: Mapping[int, float] = MappingProxyType(
    {0: 0.55, 1: 0.40, 2: 0.25, 3: 0.15, 4: 0.05}
)
DEFAULT_PHASE_BASE_RISK = 0.30

TECH_ADJUSTMENT: Mapping[str, float] = MappingProxyType(
    {
        "Solar": 0.02,
        "Wind": -0.03,
        "Battery": 0.05,
        "Hybrid": 0.03,
        "Gas": 0.08,
        "Other": 0.04,
    }
)

ZONE_ADJUSTMENT: Mapping[str, float] = MappingProxyType(
    {
        "WEST": 0.06,
        "PANHANDLE": 0.04,
        "NORTH": 0.01,
        "SOUTH": -0.02,
        "HOUSTON": -0.03,
        "EAST": -0.01,
        "COAST": -0.02,
    }
)

# Co-located requests above this count add risk, below it reduce risk.
POI_REFERENCE_COUNT = 5
POI_RISK_PER_PROJECT = 0.008


def phase_base_risk(phase: int) -> float:
    """Base withdrawal risk for a study phase."""
    return PHASE_BASE_RISK.get(phase, DEFAULT_PHASE_BASE_RISK)


def tech_adjustment(tech_type: str) -> float:
    """Risk adjustment for a technology, 0 if unknown."""
    return TECH_ADJUSTMENT.get(tech_type, 0.0)


def zone_adjustment(zone: str) -> float:
    """Risk adjustment for a grid zone, 0 if unknown."""
    return ZONE_ADJUSTMENT.get(zone, 0.0)


def capacity_adjustment(capacity: float) -> float:
    """Risk adjustment for the capacity tier."""
    if capacity > 200:
        return 0.04
    if capacity < 50:
        return -0.02
    return 0.0


def firm_capacity_adjustment(firm_capacity: float) -> float:
    """Risk adjustment for firm capacity; exactly 0.5 counts as not firm."""
    return -0.03 if firm_capacity > 0.5 else 0.02


class WithdrawalRiskModel:
    """Rule-based withdrawal probability model.

    The probability is a phase-keyed base risk plus additive adjustments
    for POI congestion, technology, zone, capacity tier, firm capacity,
    energy community eligibility and behind-the-meter status, clamped
    to [0.03, 0.97].
    """

    def predict_withdrawal(self, features: ProjectFeatures) -> float:
        """Compute the withdrawal probability.

        Args:
            features: Project features

        Returns:
            Withdrawal probability in [0.03, 0.97]
        """
        raw = (
            phase_base_risk(features.phase)
            + (features.poi_count - POI_REFERENCE_COUNT) * POI_RISK_PER_PROJECT
            + tech_adjustment(features.tech_type)
            + zone_adjustment(features.zone)
            + capacity_adjustment(features.capacity)
            + firm_capacity_adjustment(features.firm_capacity)
            + (-0.04 if features.energy_community else 0.0)
            + (-0.02 if features.behind_meter else 0.0)
        )
        wd = clamp(MIN_WITHDRAWAL_PROBABILITY, MAX_WITHDRAWAL_PROBABILITY, raw)
        logger.debug("Withdrawal probability: raw=%.4f clamped=%.4f", raw, wd)
        return wd
