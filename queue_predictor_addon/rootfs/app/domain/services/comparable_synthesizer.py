"""Comparable and scenario synthesizer service.

Domain service deriving peer projects and what-if mitigations from the
current project's estimates.
"""

from dataclasses import dataclass

from domain.value_objects import (
    ComparableProject,
    MitigationScenario,
    ProjectFeatures,
)

from .display_rounding import round_fixed, round_half_up


@dataclass(frozen=True)
class _ComparableTemplate:
    """Offsets turning the current project into a peer."""

    name: str
    mw_factor: float
    wd_factor: float
    tl_offset: float
    cost_factor: float
    zone: str | None = None
    status: str = "Active"


COMPARABLE_TEMPLATES: tuple[_ComparableTemplate, ...] = (
    _ComparableTemplate("Harper Solar I", 0.92, 0.88, -1.2, 0.91),
    _ComparableTemplate("Lone Star BESS", 1.14, 1.07, 2.1, 1.12),
    _ComparableTemplate("Prairie Wind II", 0.78, 0.72, -3.0, 0.80, zone="NORTH", status="IA Signed"),
)


class ComparableSynthesizer:
    """Synthesize comparable projects and mitigation scenarios.

    Comparables are scaled variants of the current project, not records
    looked up from a queue report. Scenario deltas are illustrative and
    are never obtained by re-running the engine on modified features.
    """

    def comparables(
        self,
        features: ProjectFeatures,
        wd: float,
        timeline: float,
        cost: float,
    ) -> tuple[ComparableProject, ...]:
        """Build the comparable projects.

        Args:
            features: Current project features
            wd: Current withdrawal probability
            timeline: Current timeline in months (unrounded)
            cost: Current upgrade cost in $M (unrounded)

        Returns:
            Three comparable projects
        """
        return tuple(
            ComparableProject(
                name=t.name,
                mw=round_half_up(features.capacity * t.mw_factor),
                zone=t.zone or features.zone,
                wd=round_fixed(wd * t.wd_factor, 2),
                timeline=round_fixed(timeline + t.tl_offset, 1),
                cost=round_fixed(cost * t.cost_factor, 1),
                status=t.status,
            )
            for t in COMPARABLE_TEMPLATES
        )

    def scenarios(self, features: ProjectFeatures, cost: float) -> tuple[MitigationScenario, ...]:
        """Build the what-if mitigation scenarios.

        Args:
            features: Current project features
            cost: Current upgrade cost in $M (unrounded)

        Returns:
            Four mitigation scenarios
        """
        return (
            MitigationScenario(
                label=f"Reduce capacity to {round_half_up(features.capacity * 0.85)} MW",
                wd_delta=-0.08,
                cost_delta=-(cost * 0.12),
                tl_delta=-0.5,
            ),
            MitigationScenario(
                label="Move to alternate POI (<5 projects)",
                wd_delta=-0.12,
                cost_delta=-(cost * 0.08),
                tl_delta=1.0,
            ),
            MitigationScenario(
                label="Add energy community eligibility",
                wd_delta=-0.04,
                cost_delta=0.0,
                tl_delta=0.0,
            ),
            MitigationScenario(
                label=f"Add {round_half_up(features.capacity * 0.5)} MWh battery storage",
                wd_delta=-0.06,
                cost_delta=cost * 0.18,
                tl_delta=2.0,
            ),
        )
