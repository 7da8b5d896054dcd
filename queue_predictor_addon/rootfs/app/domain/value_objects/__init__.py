"""Value objects for the queue prediction domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .history_entry import HistoryEntry, PortfolioSummary
from .prediction_result import (
    ComparableProject,
    MitigationScenario,
    PhaseRisk,
    PredictionResult,
    ProjectionSample,
    RadarDimension,
)
from .project_features import ProjectFeatures
from .project_submission import ProjectSubmission
from .reference_tables import (
    COUNTIES,
    PHASES,
    TECHNOLOGIES,
    ZONES,
    PhaseDefinition,
    get_phase_label,
)
from .risk_assessment import RiskAssessment, RiskBand, ScoreBand
from .temporal_estimate import TemporalEstimate

__all__ = [
    "COUNTIES",
    "ComparableProject",
    "HistoryEntry",
    "MitigationScenario",
    "PHASES",
    "PhaseDefinition",
    "PhaseRisk",
    "PortfolioSummary",
    "PredictionResult",
    "ProjectFeatures",
    "ProjectSubmission",
    "ProjectionSample",
    "RadarDimension",
    "RiskAssessment",
    "RiskBand",
    "ScoreBand",
    "TECHNOLOGIES",
    "TemporalEstimate",
    "ZONES",
    "get_phase_label",
]
