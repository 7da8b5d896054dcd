"""Risk assessor service.

Domain service classifying a prediction and writing its analyst summary.
"""

from domain.value_objects import (
    PredictionResult,
    ProjectFeatures,
    RiskAssessment,
    RiskBand,
    ScoreBand,
    get_phase_label,
)

from .display_rounding import round_fixed

HIGH_RISK_THRESHOLD = 0.5
MODERATE_RISK_THRESHOLD = 0.3
STRONG_SCORE_THRESHOLD = 70
FAIR_SCORE_THRESHOLD = 50


def classify_risk(wd: float) -> RiskBand:
    """Band a withdrawal probability (thresholds are exclusive)."""
    if wd > HIGH_RISK_THRESHOLD:
        return RiskBand.HIGH
    if wd > MODERATE_RISK_THRESHOLD:
        return RiskBand.MODERATE
    return RiskBand.LOW


def classify_score(score: int) -> ScoreBand:
    """Band a certainty score (thresholds are inclusive)."""
    if score >= STRONG_SCORE_THRESHOLD:
        return ScoreBand.STRONG
    if score >= FAIR_SCORE_THRESHOLD:
        return ScoreBand.FAIR
    return ScoreBand.WEAK


def _format_number(value: float) -> str:
    """Format like the dashboard: no trailing '.0' on whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class RiskAssessor:
    """Turn a prediction result into a display assessment."""

    def assess(self, features: ProjectFeatures, result: PredictionResult) -> RiskAssessment:
        """Classify the result and compose the narrative summary.

        Args:
            features: Project features the result was computed from
            result: Engine output

        Returns:
            Risk assessment
        """
        band = classify_risk(result.wd)
        return RiskAssessment(
            risk_band=band,
            score_band=classify_score(result.score),
            summary=self._summary(band, features, result),
        )

    def _summary(
        self,
        band: RiskBand,
        features: ProjectFeatures,
        result: PredictionResult,
    ) -> str:
        percent = _format_number(round_fixed(result.wd * 100, 0))
        timeline = _format_number(result.timeline)
        cost = _format_number(result.cost)
        phase_label = get_phase_label(features.phase)

        if band is RiskBand.HIGH:
            return (
                f"This project carries elevated withdrawal risk at {percent}%. "
                f"The {features.zone} zone congestion ({features.poi_count} co-located "
                f"projects) and {phase_label} phase position drive this exposure. "
                f"Projected {timeline}-month timeline and ${cost}M upgrade costs "
                f"represent meaningful IRR headwinds of {_format_number(result.irr_hit)}%."
            )
        if band is RiskBand.MODERATE:
            return (
                f"Moderate risk profile at {percent}% withdrawal probability. "
                f"{features.zone} zone POI congestion with {features.poi_count} "
                f"co-located projects adds queue pressure. Timeline of {timeline} "
                f"months and ${cost}M costs are within typical range."
            )
        return (
            f"Strong fundamentals with only {percent}% withdrawal risk. "
            f"{phase_label} phase provides queue stability. Expected {timeline}-month "
            f"completion and ${cost}M upgrade costs are favorable relative to "
            f"comparable {features.zone} projects."
        )
