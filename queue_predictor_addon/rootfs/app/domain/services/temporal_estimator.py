"""Temporal estimator service.

Domain service estimating months to IA signing and network upgrade cost.
"""

import logging

from domain.value_objects import ProjectFeatures, TemporalEstimate

from .display_rounding import clamp, round_fixed

logger = logging.getLogger(__name__)

MIN_TIMELINE_MONTHS = 3
MAX_TIMELINE_MONTHS = 48
MIN_COST_MUSD = 0.5
MAX_COST_MUSD = 30

# Projects queued longer than a year are assumed to have studies underway.
AGED_QUEUE_DAYS = 365
WEST_ZONE_COST_PREMIUM = 1.2


class TemporalEstimator:
    """Estimate timeline, upgrade cost and their financial consequences."""

    def estimate_timeline(self, features: ProjectFeatures) -> float:
        """Months to IA signing, clamped to [3, 48]."""
        queue_adjustment = -3 if features.days_in_queue > AGED_QUEUE_DAYS else 2
        raw = 30 - features.phase * 6 + features.poi_count * 0.3 + queue_adjustment
        return clamp(MIN_TIMELINE_MONTHS, MAX_TIMELINE_MONTHS, raw)

    def estimate_cost(self, features: ProjectFeatures) -> float:
        """Network upgrade cost in $M, clamped to [0.5, 30]."""
        zone_premium = WEST_ZONE_COST_PREMIUM if features.zone == "WEST" else 0
        raw = 2 + features.capacity * 0.045 + features.poi_count * 0.28 + zone_premium
        return clamp(MIN_COST_MUSD, MAX_COST_MUSD, raw)

    def estimate(self, features: ProjectFeatures) -> TemporalEstimate:
        """Compute timeline, cost and derived bounds.

        Args:
            features: Project features

        Returns:
            Temporal estimate with unrounded timeline and cost
        """
        timeline = self.estimate_timeline(features)
        cost = self.estimate_cost(features)
        logger.debug("Timeline %.2f months, cost $%.2fM", timeline, cost)

        return TemporalEstimate(
            timeline=timeline,
            cost=cost,
            cost_low=round_fixed(cost * 0.82, 1),
            cost_high=round_fixed(cost * 1.21, 1),
            tl_low=round_fixed(max(2, timeline - 3.5), 1),
            tl_high=round_fixed(timeline + 4.2, 1),
            irr_hit=-round_fixed(cost * 0.22 + timeline * 0.06, 2),
            revenue_at_risk=round_fixed(features.capacity * timeline * 0.008, 1),
        )
