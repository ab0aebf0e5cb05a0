"""
services/car_service.py
-----------------------
Business logic for managing cars.
Validates payloads, resolves identifiers and delegates storage to CarRepository.
"""

from typing import Any

from models.car import Car
from models.errors import NotFoundError, ValidationError
from repositories.car_repo import CarRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class CarService:
    """
    Handles all business rules related to cars.

    Every method either returns domain objects or raises a CarApiError;
    turning errors into responses is the caller's job.
    """

    def __init__(self, repo: CarRepository):
        self.repo = repo

    def list_cars(self) -> list[Car]:
        return self.repo.list_all()

    def get_car(self, car_id: Any) -> Car:
        """
        Resolve a car by identifier.

        Raises:
            NotFoundError: If no car has this identifier.
        """
        car = self.repo.find_by_id(car_id)
        if car is None:
            raise NotFoundError()
        return car

    def create_car(self, data: Any) -> Car:
        """
        Create a car from a JSON payload.

        Args:
            data: Decoded request body. Known fields are copied; `_id` is ignored.

        Returns:
            The stored Car with its identifier assigned.

        Raises:
            ValidationError: If the payload is missing, not an object, or
                carries none of the car fields.
        """
        if not data or not isinstance(data, dict):
            raise ValidationError("A car payload is required.")
        car = Car()
        if not car.apply(data):
            raise ValidationError("The car payload has no car fields.")
        return self.repo.append(car)

    def update_car(self, car_id: Any, changes: Any) -> Car:
        """
        Apply a partial update to an existing car.

        Only keys present in `changes` are written; everything else keeps its value.

        Raises:
            NotFoundError: If no car has this identifier.
            ValidationError: If `changes` is present but not an object.
        """
        car = self.get_car(car_id)
        if changes is None:
            changes = {}
        if not isinstance(changes, dict):
            raise ValidationError("Car updates must be a JSON object.")
        applied = car.apply(changes)
        logger.info(f"Updated car #{car.id}: {', '.join(applied) or 'no fields'}")
        return car

    def remove_car(self, car_id: Any) -> None:
        """
        Remove a car.

        Raises:
            NotFoundError: If no car has this identifier.
        """
        car = self.get_car(car_id)
        self.repo.remove_by_id(car.id)
