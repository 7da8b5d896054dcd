"""Phase decomposer service.

Domain service spreading the withdrawal probability across study phases.
"""

from domain.value_objects import PHASES, PhaseRisk

from .display_rounding import round_fixed

# Share of the overall withdrawal probability carried by each phase;
# phases past the last factor reuse the full probability.
PHASE_RISK_FACTORS: tuple[float, ...] = (0.6, 0.8, 0.95)
MAX_PHASE_RISK = 0.97


class PhaseDecomposer:
    """Expand a withdrawal probability into a per-phase risk curve."""

    def risk_curve(self, wd: float) -> tuple[float, ...]:
        """Return the four-point risk curve for a withdrawal probability."""
        return tuple(min(MAX_PHASE_RISK, wd * factor) for factor in PHASE_RISK_FACTORS) + (wd,)

    def decompose(self, wd: float, phase: int) -> tuple[PhaseRisk, ...]:
        """Compute the displayed risk of every study phase.

        Args:
            wd: Withdrawal probability
            phase: Current study phase of the project

        Returns:
            One PhaseRisk per phase, in phase order
        """
        curve = self.risk_curve(wd)
        last = len(curve) - 1
        return tuple(
            PhaseRisk(
                name=definition.short,
                risk=round_fixed(curve[min(i, last)] * 100, 1),
                active=i <= phase,
            )
            for i, definition in enumerate(PHASES)
        )
