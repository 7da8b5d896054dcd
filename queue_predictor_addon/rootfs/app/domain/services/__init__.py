"""Domain services for queue predictions.

Services contain pure business logic and operate on value objects.
"""

from .comparable_synthesizer import ComparableSynthesizer
from .health_radar_scorer import HealthRadarScorer
from .phase_decomposer import PhaseDecomposer
from .portfolio_analyzer import PortfolioAnalyzer
from .projection_generator import ProjectionGenerator
from .queue_prediction_engine import QueuePredictionEngine, certainty_score
from .risk_assessor import RiskAssessor, classify_risk, classify_score
from .temporal_estimator import TemporalEstimator
from .withdrawal_risk_model import WithdrawalRiskModel

__all__ = [
    "ComparableSynthesizer",
    "HealthRadarScorer",
    "PhaseDecomposer",
    "PortfolioAnalyzer",
    "ProjectionGenerator",
    "QueuePredictionEngine",
    "RiskAssessor",
    "TemporalEstimator",
    "WithdrawalRiskModel",
    "certainty_score",
    "classify_risk",
    "classify_score",
]
