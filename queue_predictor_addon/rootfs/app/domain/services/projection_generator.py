"""Projection generator service.

Domain service producing the quarterly withdrawal probability band.
"""

import numpy as np

from domain.value_objects import ProjectionSample

from .display_rounding import round_fixed

NUM_SAMPLES = 12
MONTHS_PER_SAMPLE = 3

LOW_OFFSET = 0.08
HIGH_OFFSET = 0.09
BAND_WIDENING = 0.003
MID_AMPLITUDE = 0.02


class ProjectionGenerator:
    """Generate a 36-month low/mid/high withdrawal probability band.

    The band is a closed-form function of the withdrawal probability and
    the sample index: the bounds widen linearly and the central value
    oscillates with sin(index). Nothing here is sampled.
    """

    def generate(self, wd: float) -> tuple[ProjectionSample, ...]:
        """Compute the projection samples.

        Args:
            wd: Withdrawal probability

        Returns:
            Twelve samples labeled M3 through M36
        """
        index = np.arange(NUM_SAMPLES, dtype=np.float64)
        low = np.maximum(0.0, wd - LOW_OFFSET - index * BAND_WIDENING)
        # np.sin may differ from other libm builds in the last bit; only an
        # exact three-decimal tie in mid would round differently.
        mid = wd + np.sin(index) * MID_AMPLITUDE
        high = np.minimum(1.0, wd + HIGH_OFFSET + index * BAND_WIDENING)

        return tuple(
            ProjectionSample(
                month=f"M{(i + 1) * MONTHS_PER_SAMPLE}",
                low=round_fixed(float(low[i]), 3),
                mid=round_fixed(float(mid[i]), 3),
                high=round_fixed(float(high[i]), 3),
            )
            for i in range(NUM_SAMPLES)
        )
