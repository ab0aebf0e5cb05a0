"""
main.py
-------
Entry point for the car registry API.

Responsibilities:
    - Create (and optionally seed) the in-memory car store.
    - Build the Flask application and register the car routes.
    - Register the JSON error handlers and start the server.
"""

from typing import Any, Callable, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest

from config import API_PREFIX, DEBUG, HOST, PORT, SEED_FIXTURES
from handlers.car_handler import CarController
from handlers.error_handler import register_error_handlers
from models.errors import ValidationError
from models.result import CarRequest, HandlerResult
from repositories.car_repo import CarRepository
from services.car_service import CarService
from utils.logger import get_logger

logger = get_logger(__name__)


def _read_body() -> Any:
    """
    Decode the JSON body of the current request.

    Returns:
        The decoded body, or None when the request carried no body.

    Raises:
        ValidationError: If a body was sent but is not valid JSON.
    """
    if not request.get_data(cache=True):
        return None
    try:
        return request.get_json(force=True)
    except BadRequest:
        logger.warning(f"{request.method} {request.path} -> 400: malformed JSON body")
        raise ValidationError("Request body is not valid JSON.")


def _dispatch(handler: Callable[[CarRequest], HandlerResult], **params):
    """Run a controller handler for the current Flask request."""
    car_request = CarRequest(
        method=request.method,
        path=request.path,
        params=params,
        body=_read_body(),
    )
    result = handler(car_request)
    if not result.ok:
        # Rendered by the registered error handlers.
        raise result.error
    return jsonify(result.body), result.status


def create_app(repo: Optional[CarRepository] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        repo: Store to serve. When omitted a new one is created and,
            if SEED_FIXTURES is set, filled with the fixture cars.
    """
    if repo is None:
        repo = CarRepository()
        if SEED_FIXTURES:
            repo.reset()

    controller = CarController(CarService(repo))

    app = Flask(__name__)
    app.extensions["car_repository"] = repo

    # ── 1. Register routes ────────────────────────────────
    cars_url = f"{API_PREFIX}/cars"
    app.add_url_rule(
        cars_url, "list_cars",
        lambda: _dispatch(controller.get_all), methods=["GET"],
    )
    app.add_url_rule(
        cars_url, "create_car",
        lambda: _dispatch(controller.create), methods=["POST"],
    )
    app.add_url_rule(
        f"{cars_url}/<car_id>", "get_car",
        lambda car_id: _dispatch(controller.get_one, id=car_id), methods=["GET"],
    )
    app.add_url_rule(
        f"{cars_url}/<car_id>", "update_car",
        lambda car_id: _dispatch(controller.update, id=car_id), methods=["PUT"],
    )
    app.add_url_rule(
        f"{cars_url}/<car_id>", "remove_car",
        lambda car_id: _dispatch(controller.remove, id=car_id), methods=["DELETE"],
    )

    # ── 2. Register error handlers ────────────────────────
    register_error_handlers(app)

    logger.info(f"Car API ready at {cars_url} with {len(repo)} cars.")
    return app


def main() -> None:
    """Initialize and run the API server."""
    app = create_app()
    logger.info(f"Serving on http://{HOST}:{PORT} (debug={DEBUG})")
    app.run(host=HOST, port=PORT, debug=DEBUG)


if __name__ == "__main__":
    main()
