"""Queue prediction engine.

Domain service orchestrating the scoring sub-models into a single
prediction result.
"""

import logging

from domain.value_objects import PredictionResult, ProjectFeatures

from .comparable_synthesizer import ComparableSynthesizer
from .display_rounding import round_fixed, round_half_up
from .health_radar_scorer import HealthRadarScorer
from .phase_decomposer import PhaseDecomposer
from .projection_generator import ProjectionGenerator
from .temporal_estimator import (
    MAX_COST_MUSD,
    MAX_TIMELINE_MONTHS,
    TemporalEstimator,
)
from .withdrawal_risk_model import WithdrawalRiskModel

logger = logging.getLogger(__name__)

CONGESTED_POI_COUNT = 10
CONGESTION_PENALTY = 5


def certainty_score(wd: float, timeline: float, cost: float, poi_count: int) -> int:
    """Blend risk, timeline and cost into a queue certainty score.

    The score is not clamped and can leave 0..100 for extreme inputs.
    """
    return round_half_up(
        100
        - wd * 55
        - (timeline / MAX_TIMELINE_MONTHS) * 22
        - (cost / MAX_COST_MUSD) * 18
        - (CONGESTION_PENALTY if poi_count > CONGESTED_POI_COUNT else 0)
    )


class QueuePredictionEngine:
    """Deterministic interconnection queue prediction engine.

    The engine is a pure, total function of the project features: it
    holds no state between calls, performs no I/O and raises for no
    input. Unknown enumerations fall back to neutral adjustments and
    out-of-range numbers are only constrained by the output clamps.
    """

    def __init__(
        self,
        risk_model: WithdrawalRiskModel | None = None,
        temporal_estimator: TemporalEstimator | None = None,
        phase_decomposer: PhaseDecomposer | None = None,
        projection_generator: ProjectionGenerator | None = None,
        radar_scorer: HealthRadarScorer | None = None,
        synthesizer: ComparableSynthesizer | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            risk_model: Withdrawal risk model
            temporal_estimator: Timeline and cost estimator
            phase_decomposer: Per-phase risk decomposer
            projection_generator: Probability band generator
            radar_scorer: Health radar scorer
            synthesizer: Comparable and scenario synthesizer
        """
        self._risk_model = risk_model or WithdrawalRiskModel()
        self._temporal_estimator = temporal_estimator or TemporalEstimator()
        self._phase_decomposer = phase_decomposer or PhaseDecomposer()
        self._projection_generator = projection_generator or ProjectionGenerator()
        self._radar_scorer = radar_scorer or HealthRadarScorer()
        self._synthesizer = synthesizer or ComparableSynthesizer()

    def predict(self, features: ProjectFeatures) -> PredictionResult:
        """Predict withdrawal risk and derived metrics for a project.

        Args:
            features: Project features

        Returns:
            Prediction result
        """
        wd = self._risk_model.predict_withdrawal(features)
        estimate = self._temporal_estimator.estimate(features)
        timeline, cost = estimate.timeline, estimate.cost

        result = PredictionResult(
            wd=wd,
            timeline=round_fixed(timeline, 1),
            cost=round_fixed(cost, 1),
            cost_low=estimate.cost_low,
            cost_high=estimate.cost_high,
            tl_low=estimate.tl_low,
            tl_high=estimate.tl_high,
            irr_hit=estimate.irr_hit,
            revenue_at_risk=estimate.revenue_at_risk,
            score=certainty_score(wd, timeline, cost, features.poi_count),
            phase_data=self._phase_decomposer.decompose(wd, features.phase),
            mc_samples=self._projection_generator.generate(wd),
            radar_data=self._radar_scorer.score(features),
            comps=self._synthesizer.comparables(features, wd, timeline, cost),
            scenarios=self._synthesizer.scenarios(features, cost),
        )
        logger.debug(
            "Prediction: wd=%.3f timeline=%.1f cost=%.1f score=%d",
            result.wd,
            result.timeline,
            result.cost,
            result.score,
        )
        return result
