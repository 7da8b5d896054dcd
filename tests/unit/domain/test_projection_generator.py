"""Unit tests for ProjectionGenerator."""

import math

import pytest
from domain.services import ProjectionGenerator


@pytest.fixture
def generator() -> ProjectionGenerator:
    return ProjectionGenerator()


def test_twelve_quarterly_labels(generator: ProjectionGenerator) -> None:
    samples = generator.generate(0.5)
    assert [s.month for s in samples] == [f"M{m}" for m in range(3, 37, 3)]


def test_reference_band(generator: ProjectionGenerator) -> None:
    samples = generator.generate(0.508)

    assert (samples[0].low, samples[0].mid, samples[0].high) == (0.428, 0.508, 0.598)
    assert samples[1].mid == 0.525
    assert (samples[11].low, samples[11].high) == (0.395, 0.631)


def test_mid_follows_sine_of_index(generator: ProjectionGenerator) -> None:
    """Test that the central value is a closed-form oscillation."""
    wd = 0.42
    for i, sample in enumerate(generator.generate(wd)):
        assert sample.mid == pytest.approx(wd + math.sin(i) * 0.02, abs=5e-4)


@pytest.mark.parametrize(
    ("wd", "expected_mid"),
    [
        (
            0.5,
            (0.5, 0.517, 0.518, 0.503, 0.485, 0.481, 0.494, 0.513, 0.52, 0.508, 0.489, 0.48),
        ),
        (
            0.3,
            (0.3, 0.317, 0.318, 0.303, 0.285, 0.281, 0.294, 0.313, 0.32, 0.308, 0.289, 0.28),
        ),
    ],
)
def test_mid_golden_values(
    generator: ProjectionGenerator, wd: float, expected_mid: tuple
) -> None:
    """Test all twelve central values against the dashboard figures."""
    assert tuple(s.mid for s in generator.generate(wd)) == expected_mid


def test_band_widens_with_index(generator: ProjectionGenerator) -> None:
    samples = generator.generate(0.5)
    widths = [s.high - s.low for s in samples]
    assert widths == sorted(widths)
    assert all(s.low <= s.mid <= s.high for s in samples)


def test_band_limits_at_extremes(generator: ProjectionGenerator) -> None:
    assert all(s.low == 0.0 for s in generator.generate(0.03))
    assert all(s.high == 1.0 for s in generator.generate(0.97))


def test_generation_is_deterministic(generator: ProjectionGenerator) -> None:
    assert generator.generate(0.37) == ProjectionGenerator().generate(0.37)
