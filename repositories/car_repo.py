"""
repositories/car_repo.py
------------------------
In-memory record store for cars.
Owns the ordered sequence of Car objects; nothing else keeps a reference to it.
Not thread-safe: requests are expected to be handled one at a time.
"""

import uuid
from typing import Any, Optional

from db.init_db import fixture_cars
from models.car import Car
from models.errors import DuplicateCarError
from utils.logger import get_logger

logger = get_logger(__name__)


class CarRepository:
    """Repository for CRUD operations on the in-memory car collection."""

    def __init__(self, cars: Optional[list[Car]] = None):
        self._cars: list[Car] = []
        # Identifiers of removed cars; they are never handed out again.
        self._retired_ids: set[str] = set()
        for car in cars or []:
            self.append(car)

    def __len__(self) -> int:
        return len(self._cars)

    # ── READ ──────────────────────────────────────────────

    def list_all(self) -> list[Car]:
        """
        Return every car in insertion order.

        The returned list is the store's own sequence; callers must not mutate it.
        """
        return self._cars

    def find_by_id(self, car_id: Any) -> Optional[Car]:
        """
        Find a car by identifier.

        Args:
            car_id: Identifier; compared as a string, so 5 and "5" are equal.

        Returns:
            The matching Car, or None if not found.
        """
        wanted = str(car_id)
        for car in self._cars:
            if car.id == wanted:
                return car
        return None

    # ── CREATE ────────────────────────────────────────────

    def append(self, car: Car) -> Car:
        """
        Add a car at the end of the collection.

        A car without an identifier gets a fresh one.

        Raises:
            DuplicateCarError: If the identifier is in use or was retired.
        """
        if car.id is None:
            car.id = self._new_id()
        else:
            car.id = str(car.id)
            if car.id in self._retired_ids or self.find_by_id(car.id) is not None:
                logger.warning(f"Rejected duplicate car id {car.id}")
                raise DuplicateCarError()
        self._cars.append(car)
        logger.info(f"Added car {car}")
        return car

    # ── DELETE ────────────────────────────────────────────

    def remove_by_id(self, car_id: Any) -> bool:
        """
        Remove the first car whose identifier matches.

        Returns:
            True if a car was removed, False otherwise.
        """
        car = self.find_by_id(car_id)
        if car is None:
            return False
        self._cars.remove(car)
        self._retired_ids.add(car.id)
        logger.info(f"Removed car #{car.id}")
        return True

    # ── RESET ─────────────────────────────────────────────

    def reset(self) -> None:
        """Replace the whole collection with a fresh copy of the fixture cars."""
        self._cars = fixture_cars()
        self._retired_ids.clear()
        logger.info(f"Store reset to {len(self._cars)} fixture cars")

    # ── HELPERS ───────────────────────────────────────────

    def _new_id(self) -> str:
        while True:
            candidate = uuid.uuid4().hex
            if candidate not in self._retired_ids and self.find_by_id(candidate) is None:
                return candidate
