"""Risk assessment value objects.

Display classification of a prediction result.
"""

from dataclasses import dataclass
from enum import Enum


class RiskBand(str, Enum):
    """Withdrawal risk band.

    Attributes:
        HIGH: Withdrawal probability above 50%
        MODERATE: Withdrawal probability above 30%
        LOW: Withdrawal probability of 30% or less
    """

    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"

    @property
    def label(self) -> str:
        """Tag shown next to the assessment."""
        return {
            RiskBand.HIGH: "HIGH RISK",
            RiskBand.MODERATE: "MODERATE",
            RiskBand.LOW: "LOW RISK",
        }[self]


class ScoreBand(str, Enum):
    """Certainty score band (70+ strong, 50+ fair, below 50 weak)."""

    STRONG = "strong"
    FAIR = "fair"
    WEAK = "weak"


@dataclass(frozen=True)
class RiskAssessment:
    """Classification and narrative for a prediction.

    Attributes:
        risk_band: Band of the withdrawal probability
        score_band: Band of the certainty score
        summary: Analyst-facing narrative paragraph
    """

    risk_band: RiskBand
    score_band: ScoreBand
    summary: str

    def to_dict(self) -> dict:
        return {
            "riskBand": self.risk_band.value,
            "riskLabel": self.risk_band.label,
            "scoreBand": self.score_band.value,
            "summary": self.summary,
        }
