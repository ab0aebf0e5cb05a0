"""
handlers/car_handler.py
-----------------------
Request handlers for the cars resource.
Each handler turns a CarRequest into a HandlerResult and delegates all rules
to CarService. Handlers never write responses: failures come back as the
error half of the result for the dispatcher to render.
"""

from models.errors import CarApiError
from models.result import CarRequest, HandlerResult
from services.car_service import CarService
from utils.logger import get_logger

logger = get_logger(__name__)

REMOVED_MESSAGE = "Removed the car from the database."


class CarController:
    """List, read, create, update and remove cars."""

    def __init__(self, service: CarService):
        self.service = service

    def get_all(self, request: CarRequest) -> HandlerResult:
        """GET /cars - every car as a JSON array."""
        cars = self.service.list_cars()
        return HandlerResult.success([car.to_dict() for car in cars])

    def get_one(self, request: CarRequest) -> HandlerResult:
        """GET /cars/<id> - a single car."""
        try:
            car = self.service.get_car(request.params.get("id"))
        except CarApiError as e:
            return self._fail(request, e)
        return HandlerResult.success(car.to_dict())

    def create(self, request: CarRequest) -> HandlerResult:
        """POST /cars - create a car from the request body."""
        try:
            car = self.service.create_car(request.body)
        except CarApiError as e:
            return self._fail(request, e)
        return HandlerResult.success(car.to_dict())

    def update(self, request: CarRequest) -> HandlerResult:
        """PUT /cars/<id> - merge the body's fields onto an existing car."""
        try:
            car = self.service.update_car(request.params.get("id"), request.body)
        except CarApiError as e:
            return self._fail(request, e)
        return HandlerResult.success(car.to_dict())

    def remove(self, request: CarRequest) -> HandlerResult:
        """DELETE /cars/<id> - remove a car."""
        try:
            self.service.remove_car(request.params.get("id"))
        except CarApiError as e:
            return self._fail(request, e)
        return HandlerResult.success({"message": REMOVED_MESSAGE})

    @staticmethod
    def _fail(request: CarRequest, error: CarApiError) -> HandlerResult:
        logger.warning(f"{request.method} {request.path} -> {error.status}: {error.message}")
        return HandlerResult.failure(error)
