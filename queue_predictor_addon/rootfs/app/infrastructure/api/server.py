"""Flask HTTP API Server.

HTTP API for the queue predictor dashboard.
Provides endpoints for predictions, run history and portfolio views.
"""

import asyncio
import logging
import math
import os
import sys
from datetime import datetime
from functools import wraps
from pathlib import Path
from typing import Any, Callable

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import DEFAULT_FORM_VALUES, QueueApplicationService
from domain.value_objects import ProjectFeatures, ProjectSubmission
from infrastructure.adapters import DEFAULT_HISTORY_CAPACITY, MemoryPredictionHistory

# Configure logging
log_level = os.getenv("LOG_LEVEL", "info").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
_LOGGER = logging.getLogger(__name__)

# Create Flask app
app = Flask(__name__)

# Initialize services
history_capacity = int(os.getenv("HISTORY_CAPACITY", str(DEFAULT_HISTORY_CAPACITY)))
latency_seconds = float(os.getenv("PREDICTION_LATENCY_SECONDS", "0.9"))
history = MemoryPredictionHistory(capacity=history_capacity)
queue_service = QueueApplicationService(history, latency_seconds=latency_seconds)


def async_route(f: Callable) -> Callable:
    """Decorator to run async functions in Flask routes.

    Uses asyncio.run() for proper event loop lifecycle management.
    """
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))
    return wrapper


def _field(data: dict, camel: str, snake: str) -> Any:
    """Read a form field by camelCase or snake_case key, else its default."""
    if camel in data:
        return data[camel]
    if snake in data:
        return data[snake]
    return DEFAULT_FORM_VALUES[camel]


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        if value.lower() in ("true", "1", "yes", "on"):
            return True
        if value.lower() in ("false", "0", "no", "off", ""):
            return False
        raise ValueError(f"expected a boolean, got {value!r}")
    return bool(value)


def _parse_float(value: Any, name: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"{name} must be a finite number, got {value!r}")
    return number


def _parse_int(value: Any, name: str) -> int:
    """Parse a whole number; fractional values are rejected, not truncated."""
    number = _parse_float(value, name)
    if not number.is_integer():
        raise ValueError(f"{name} must be a whole number, got {value!r}")
    return int(number)


def parse_submission(data: dict) -> ProjectSubmission:
    """Build a validated submission from a request body.

    Raises:
        ValueError: If a field has the wrong type or is out of range
    """
    features = ProjectFeatures(
        phase=_parse_int(_field(data, "phase", "phase"), "phase"),
        tech_type=str(_field(data, "techType", "tech_type")),
        zone=str(_field(data, "zone", "zone")),
        capacity=_parse_float(_field(data, "capacity", "capacity"), "capacity"),
        poi_count=_parse_int(_field(data, "poiCount", "poi_count"), "poiCount"),
        firm_capacity=_parse_float(
            _field(data, "firmCapacity", "firm_capacity"), "firmCapacity"
        ),
        energy_community=_parse_bool(_field(data, "energyCommunity", "energy_community")),
        behind_meter=_parse_bool(_field(data, "behindMeter", "behind_meter")),
        days_in_queue=_parse_int(
            _field(data, "daysInQueue", "days_in_queue"), "daysInQueue"
        ),
    )
    return ProjectSubmission(
        features=features,
        project_name=str(_field(data, "projectName", "project_name") or ""),
        county=str(_field(data, "county", "county")),
    )


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route("/api/v1/status", methods=["GET"])
@async_route
async def get_status() -> Response:
    """Get prediction service status."""
    try:
        status = await queue_service.get_status()
        return jsonify(status)
    except Exception as e:
        _LOGGER.exception("Error getting status")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/reference", methods=["GET"])
def get_reference() -> Response:
    """Get zones, technologies, phases, counties and form defaults."""
    return jsonify(queue_service.get_reference_tables())


@app.route("/api/v1/predict", methods=["POST"])
@async_route
async def predict() -> Response:
    """Run a withdrawal risk prediction.

    Request body (every field optional, form defaults apply):
    {
        "projectName": str,
        "capacity": float (1-999 MW),
        "techType": str (Solar, Wind, Battery, Hybrid, Gas, Other),
        "phase": int (0-4),
        "poiCount": int (1-50),
        "zone": str,
        "county": str,
        "daysInQueue": int (0-1825),
        "firmCapacity": float (0-1),
        "energyCommunity": bool,
        "behindMeter": bool
    }
    """
    try:
        data = request.get_json(silent=True)
        if data is None:
            return jsonify({"error": "No data provided"}), 400
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        submission = parse_submission(data)
        result, assessment = await queue_service.run_prediction(submission)

        return jsonify({
            "success": True,
            "project": submission.to_dict(),
            "result": result.to_dict(),
            "assessment": assessment.to_dict(),
        })

    except (TypeError, ValueError, OverflowError) as e:
        _LOGGER.warning("Invalid prediction request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error making prediction")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/history", methods=["GET"])
@async_route
async def get_history() -> Response:
    """List recent prediction runs, newest first.

    Query parameters:
        limit: int (optional) - maximum number of runs to return
    """
    try:
        limit_raw = request.args.get("limit")
        limit = None
        if limit_raw is not None:
            try:
                limit = int(limit_raw)
            except ValueError:
                return jsonify({"error": f"Invalid limit value: {limit_raw}"}), 400

        entries = await queue_service.get_history(limit)
        return jsonify({"runs": [entry.to_dict() for entry in entries]})

    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        _LOGGER.exception("Error listing history")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/history", methods=["DELETE"])
@async_route
async def clear_history() -> Response:
    """Clear the prediction run history."""
    try:
        await queue_service.clear_history()
        return jsonify({"success": True})
    except Exception as e:
        _LOGGER.exception("Error clearing history")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/portfolio", methods=["GET"])
@async_route
async def get_portfolio() -> Response:
    """Get the portfolio summary over recorded runs."""
    try:
        summary = await queue_service.get_portfolio_summary()
        return jsonify({"summary": summary.to_dict() if summary else None})
    except Exception as e:
        _LOGGER.exception("Error computing portfolio summary")
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the server."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "5000"))

    _LOGGER.info("Starting queue predictor API server on %s:%d", host, port)
    _LOGGER.info(
        "History capacity: %d, prediction latency: %.2fs",
        history_capacity,
        latency_seconds,
    )

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
