"""
handlers/error_handler.py
-------------------------
Error middleware: renders every error raised while dispatching as JSON.
"""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from models.errors import CarApiError
from utils.logger import get_logger

logger = get_logger(__name__)


def handle_car_error(error: CarApiError):
    return jsonify(error.to_dict()), error.status


def handle_http_error(error: HTTPException):
    """Unknown routes and disallowed methods get the same JSON shape."""
    body = {
        "error": type(error).__name__,
        "message": error.description,
        "status": error.code,
    }
    # Keep headers such as Allow on 405; the body is JSON now.
    headers = [
        (name, value) for name, value in error.get_headers()
        if name.lower() != "content-type"
    ]
    return jsonify(body), error.code, headers


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(CarApiError, handle_car_error)
    app.register_error_handler(HTTPException, handle_http_error)
    logger.debug("Error handlers registered.")
