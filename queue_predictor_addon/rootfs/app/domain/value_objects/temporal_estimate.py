"""Temporal estimate value object.

Immutable data structure for timeline and upgrade cost estimates.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemporalEstimate:
    """Timeline and cost estimates for a queued project.

    ``timeline`` and ``cost`` are kept unrounded so that downstream
    computations (score, comparables, scenarios) use full precision;
    the remaining fields are already rounded for display.

    Attributes:
        timeline: Months to IA signing, clamped to 3..48
        cost: Network upgrade cost in $M, clamped to 0.5..30
        cost_low: Lower cost bound (one decimal)
        cost_high: Upper cost bound (one decimal)
        tl_low: Lower timeline bound, at least 2 (one decimal)
        tl_high: Upper timeline bound (one decimal)
        irr_hit: IRR impact in percent (two decimals)
        revenue_at_risk: Revenue exposure in $M (one decimal)
    """

    timeline: float
    cost: float
    cost_low: float
    cost_high: float
    tl_low: float
    tl_high: float
    irr_hit: float
    revenue_at_risk: float
