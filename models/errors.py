"""
models/errors.py
----------------
Error taxonomy for the car API.
Every error carries the HTTP status the dispatcher should answer with.
"""

from typing import Optional


class CarApiError(Exception):
    """Base class for every error the car API signals."""

    status: int = 500
    default_message: str = "Unexpected error."

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None):
        self.message = message or self.default_message
        if status is not None:
            self.status = status
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """JSON body for an error response."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "status": self.status,
        }


class ValidationError(CarApiError):
    """The request payload is missing or malformed."""

    status = 400
    default_message = "Invalid car payload."


class NotFoundError(CarApiError):
    """No car matches the requested identifier."""

    status = 404
    default_message = "Could not find the car you requested."


class DuplicateCarError(CarApiError):
    """The identifier is already taken (or was used by a removed car)."""

    status = 409
    default_message = "A car with this identifier already exists."
