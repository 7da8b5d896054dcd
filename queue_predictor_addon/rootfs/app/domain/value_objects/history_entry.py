"""History entry value objects.

Immutable records of past prediction runs and their portfolio aggregate.
"""

from dataclasses import dataclass
from datetime import datetime

from .prediction_result import PredictionResult
from .project_submission import ProjectSubmission


@dataclass(frozen=True)
class HistoryEntry:
    """A prediction run kept in the run history.

    Attributes:
        submission: Project as submitted
        result: Engine output for the submission
        timestamp: When the prediction was made
    """

    submission: ProjectSubmission
    result: PredictionResult
    timestamp: datetime

    def to_dict(self) -> dict:
        """Serialize as the submission merged with its result."""
        return {
            **self.submission.to_dict(),
            **self.result.to_dict(),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class PortfolioSummary:
    """Aggregate view over retained history entries.

    Attributes:
        run_count: Number of runs aggregated
        avg_score: Average certainty score (rounded)
        high_risk_count: Runs with withdrawal probability above 50%
        avg_cost: Average upgrade cost in $M (one decimal)
        total_capacity_mw: Total capacity across runs
    """

    run_count: int
    avg_score: int
    high_risk_count: int
    avg_cost: float
    total_capacity_mw: float

    def __post_init__(self) -> None:
        """Validate portfolio summary values."""
        if self.run_count < 1:
            raise ValueError(f"run_count must be at least 1, got {self.run_count}")
        if not 0 <= self.high_risk_count <= self.run_count:
            raise ValueError(
                f"high_risk_count must be between 0 and {self.run_count}, "
                f"got {self.high_risk_count}"
            )

    def to_dict(self) -> dict:
        return {
            "runCount": self.run_count,
            "avgScore": self.avg_score,
            "highRisk": self.high_risk_count,
            "avgCost": self.avg_cost,
            "totalMW": self.total_capacity_mw,
        }
