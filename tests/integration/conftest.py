"""Pytest fixtures for integration tests.

This module provides fixtures for testing the Flask API with an
in-memory history and no prediction latency.
"""

from typing import Any, Dict
from unittest.mock import patch

import pytest

from application.services import QueueApplicationService
from infrastructure.adapters import MemoryPredictionHistory


@pytest.fixture
def queue_service() -> QueueApplicationService:
    """Create a QueueApplicationService without artificial latency."""
    return QueueApplicationService(MemoryPredictionHistory(), latency_seconds=0.0)


@pytest.fixture
def flask_app(queue_service: QueueApplicationService) -> Any:
    """Create a Flask test app with a fresh service.

    This fixture patches the global queue_service in the server module.
    """
    with patch.dict('os.environ', {
        'PREDICTION_LATENCY_SECONDS': '0',
        'LOG_LEVEL': 'debug',
    }):
        import infrastructure.api.server as server_module

        with patch.object(server_module, 'queue_service', queue_service):
            app = server_module.app
            app.config['TESTING'] = True
            yield app


@pytest.fixture
def client(flask_app: Any) -> Any:
    """Create a Flask test client."""
    return flask_app.test_client()


@pytest.fixture
def sample_prediction_request() -> Dict[str, Any]:
    """Sample prediction request payload (the default form)."""
    return {
        "projectName": "Glasscock Solar",
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
