"""Portfolio analyzer service.

Domain service aggregating prediction runs into a portfolio view.
"""

from typing import Sequence

import numpy as np

from domain.value_objects import HistoryEntry, PortfolioSummary

from .display_rounding import round_fixed, round_half_up
from .risk_assessor import HIGH_RISK_THRESHOLD


class PortfolioAnalyzer:
    """Summarize a set of history entries."""

    def summarize(self, entries: Sequence[HistoryEntry]) -> PortfolioSummary | None:
        """Compute the portfolio aggregate.

        Args:
            entries: History entries to aggregate

        Returns:
            Portfolio summary, or None when there are no entries
        """
        if not entries:
            return None

        scores = np.array([e.result.score for e in entries], dtype=np.float64)
        costs = np.array([e.result.cost for e in entries], dtype=np.float64)
        wds = np.array([e.result.wd for e in entries], dtype=np.float64)
        capacities = np.array(
            [e.submission.features.capacity for e in entries], dtype=np.float64
        )

        total_capacity = float(capacities.sum())
        if total_capacity.is_integer():
            total_capacity = int(total_capacity)

        return PortfolioSummary(
            run_count=len(entries),
            avg_score=round_half_up(float(scores.mean())),
            high_risk_count=int(np.count_nonzero(wds > HIGH_RISK_THRESHOLD)),
            avg_cost=round_fixed(float(costs.mean()), 1),
            total_capacity_mw=total_capacity,
        )
