"""Pytest configuration for queue predictor tests.

This module configures the Python path for tests to find the application modules
and provides project fixtures shared by all test layers.
"""

import sys
from pathlib import Path

import pytest

# Add the application directory to the Python path for test imports
APP_DIR = Path(__file__).parent.parent / "queue_predictor_addon" / "rootfs" / "app"
sys.path.insert(0, str(APP_DIR))

from domain.value_objects import ProjectFeatures, ProjectSubmission  # noqa: E402


@pytest.fixture
def reference_features() -> ProjectFeatures:
    """Default form project: 150 MW West Texas solar, screening complete."""
    return ProjectFeatures(
        phase=1,
        tech_type="Solar",
        zone="WEST",
        capacity=150,
        poi_count=6,
        firm_capacity=0.5,
        energy_community=False,
        behind_meter=False,
        days_in_queue=210,
    )


@pytest.fixture
def reference_submission(reference_features: ProjectFeatures) -> ProjectSubmission:
    """Reference project as submitted through the form."""
    return ProjectSubmission(
        features=reference_features,
        project_name="Glasscock Solar",
        county="Glasscock",
    )
