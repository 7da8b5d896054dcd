"""Queue Application Service.

Main application service that coordinates domain and infrastructure
for queue prediction use cases.
"""

import asyncio
import logging
from datetime import datetime

from domain.interfaces import IPredictionHistory
from domain.services import PortfolioAnalyzer, QueuePredictionEngine, RiskAssessor
from domain.value_objects import (
    COUNTIES,
    PHASES,
    TECHNOLOGIES,
    ZONES,
    HistoryEntry,
    PortfolioSummary,
    PredictionResult,
    ProjectSubmission,
    RiskAssessment,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_FORM_VALUES = {
    "projectName": "",
    "capacity": 150,
    "techType": "Solar",
    "phase": 1,
    "poiCount": 6,
    "zone": "WEST",
    "county": "Glasscock",
    "daysInQueue": 210,
    "firmCapacity": 0.5,
    "energyCommunity": False,
    "behindMeter": False,
}


class QueueApplicationService:
    """Application service for queue prediction operations.

    This service is the main entry point for prediction runs. It owns the
    run history; the engine never sees it.
    """

    def __init__(
        self,
        history: IPredictionHistory,
        engine: QueuePredictionEngine | None = None,
        latency_seconds: float = 0.0,
    ) -> None:
        """Initialize the queue application service.

        Args:
            history: Prediction history implementation
            engine: Prediction engine (default engine if not provided)
            latency_seconds: Cosmetic delay before each prediction

        Raises:
            ValueError: If latency_seconds is negative
        """
        if latency_seconds < 0:
            raise ValueError(f"latency_seconds must be non-negative, got {latency_seconds}")

        self._history = history
        self._engine = engine or QueuePredictionEngine()
        self._assessor = RiskAssessor()
        self._portfolio_analyzer = PortfolioAnalyzer()
        self._latency_seconds = latency_seconds

    async def run_prediction(
        self, submission: ProjectSubmission
    ) -> tuple[PredictionResult, RiskAssessment]:
        """Run a prediction for a submitted project and record it.

        Args:
            submission: Validated project submission

        Returns:
            Prediction result and its risk assessment
        """
        _LOGGER.info(
            "Running prediction for %s: %s MW %s in %s, phase %d",
            submission.display_name,
            submission.features.capacity,
            submission.features.tech_type,
            submission.features.zone,
            submission.features.phase,
        )
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)

        result = self._engine.predict(submission.features)
        assessment = self._assessor.assess(submission.features, result)

        await self._history.add(
            HistoryEntry(submission=submission, result=result, timestamp=datetime.now())
        )
        _LOGGER.info(
            "Prediction for %s: wd=%.3f score=%d (%s)",
            submission.display_name,
            result.wd,
            result.score,
            assessment.risk_band.label,
        )
        return result, assessment

    async def get_history(self, limit: int | None = None) -> tuple[HistoryEntry, ...]:
        """Get recent runs, newest first.

        Args:
            limit: If provided, return at most this many runs

        Returns:
            Tuple of history entries
        """
        return await self._history.get_all(limit)

    async def clear_history(self) -> None:
        """Forget all recorded runs."""
        _LOGGER.info("Clearing prediction history")
        await self._history.clear()

    async def get_portfolio_summary(self) -> PortfolioSummary | None:
        """Aggregate the recorded runs.

        Returns:
            Portfolio summary or None if no runs are recorded
        """
        entries = await self._history.get_all()
        return self._portfolio_analyzer.summarize(entries)

    def get_reference_tables(self) -> dict:
        """Get the enumerations and defaults used to build the input form.

        Returns:
            Dictionary of zones, technologies, phases, counties and defaults
        """
        return {
            "zones": list(ZONES),
            "technologies": list(TECHNOLOGIES),
            "phases": [
                {"label": p.label, "short": p.short, "value": p.value} for p in PHASES
            ],
            "counties": list(COUNTIES),
            "defaults": dict(DEFAULT_FORM_VALUES),
        }

    async def get_status(self) -> dict:
        """Get the current status of the service.

        Returns:
            Dictionary with status information
        """
        return {
            "ready": True,
            "history_size": await self._history.size(),
            "history_capacity": self._history.capacity,
            "latency_seconds": self._latency_seconds,
            "timestamp": datetime.now().isoformat(),
        }
