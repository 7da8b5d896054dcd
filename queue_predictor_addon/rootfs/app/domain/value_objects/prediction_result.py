"""Prediction result value objects.

Immutable data structures for prediction engine outputs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PhaseRisk:
    """Withdrawal risk attributed to one study phase.

    Attributes:
        name: Phase short code
        risk: Withdrawal risk in percent (one decimal)
        active: True if the project has reached this phase
    """

    name: str
    risk: float
    active: bool

    def to_dict(self) -> dict:
        return {"name": self.name, "risk": self.risk, "active": self.active}


@dataclass(frozen=True)
class ProjectionSample:
    """One quarterly point of the withdrawal probability band.

    Attributes:
        month: Period label (M3, M6, ..., M36)
        low: Lower band value
        mid: Central value
        high: Upper band value
    """

    month: str
    low: float
    mid: float
    high: float

    def to_dict(self) -> dict:
        return {"month": self.month, "low": self.low, "mid": self.mid, "high": self.high}


@dataclass(frozen=True)
class RadarDimension:
    """A project health dimension, nominally 0..100."""

    subject: str
    value: int

    def to_dict(self) -> dict:
        return {"subject": self.subject, "A": self.value}


@dataclass(frozen=True)
class ComparableProject:
    """A synthesized peer project derived from the current one.

    Attributes:
        name: Peer project name
        mw: Capacity in MW
        zone: Grid zone code
        wd: Withdrawal probability (two decimals)
        timeline: Months to signing (one decimal)
        cost: Upgrade cost in $M (one decimal)
        status: Queue status label
    """

    name: str
    mw: int
    zone: str
    wd: float
    timeline: float
    cost: float
    status: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "mw": self.mw,
            "zone": self.zone,
            "wd": self.wd,
            "tl": self.timeline,
            "cost": self.cost,
            "status": self.status,
        }


@dataclass(frozen=True)
class MitigationScenario:
    """A what-if mitigation with its illustrative effect.

    Attributes:
        label: Description of the mitigation
        wd_delta: Change in withdrawal probability
        cost_delta: Change in upgrade cost ($M)
        tl_delta: Change in timeline (months)
    """

    label: str
    wd_delta: float
    cost_delta: float
    tl_delta: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "wdDelta": self.wd_delta,
            "costDelta": self.cost_delta,
            "tlDelta": self.tl_delta,
        }


@dataclass(frozen=True)
class PredictionResult:
    """Result of a queue withdrawal prediction.

    Attributes:
        wd: Withdrawal probability (0.03 to 0.97)
        timeline: Months to IA signing (3 to 48, one decimal)
        cost: Network upgrade cost in $M (0.5 to 30, one decimal)
        cost_low: Lower cost bound
        cost_high: Upper cost bound
        tl_low: Lower timeline bound (at least 2)
        tl_high: Upper timeline bound
        irr_hit: IRR impact in percent (negative)
        revenue_at_risk: Revenue exposure in $M
        score: Queue certainty score, nominally 0..100 but not clamped
        phase_data: Risk per study phase
        mc_samples: Quarterly probability band
        radar_data: Project health dimensions
        comps: Comparable projects
        scenarios: Mitigation scenarios
    """

    wd: float
    timeline: float
    cost: float
    cost_low: float
    cost_high: float
    tl_low: float
    tl_high: float
    irr_hit: float
    revenue_at_risk: float
    score: int
    phase_data: tuple[PhaseRisk, ...]
    mc_samples: tuple[ProjectionSample, ...]
    radar_data: tuple[RadarDimension, ...]
    comps: tuple[ComparableProject, ...]
    scenarios: tuple[MitigationScenario, ...]

    def to_dict(self) -> dict:
        """Serialize with the keys consumed by the dashboard charts."""
        return {
            "wd": self.wd,
            "timeline": self.timeline,
            "cost": self.cost,
            "costLow": self.cost_low,
            "costHigh": self.cost_high,
            "tlLow": self.tl_low,
            "tlHigh": self.tl_high,
            "irrHit": self.irr_hit,
            "revenueAtRisk": self.revenue_at_risk,
            "score": self.score,
            "phaseData": [p.to_dict() for p in self.phase_data],
            "mcSamples": [s.to_dict() for s in self.mc_samples],
            "radarData": [r.to_dict() for r in self.radar_data],
            "comps": [c.to_dict() for c in self.comps],
            "scenarios": [s.to_dict() for s in self.scenarios],
        }
