"""
models/car.py
-------------
Domain model for car records.
"""

from dataclasses import dataclass, fields
from typing import Any, Optional

# Attribute name -> JSON key, for the attributes whose names differ.
_JSON_NAMES = {
    "id": "_id",
    "is_new": "isNew",
    "num_doors": "numDoors",
}
_ATTR_NAMES = {json_name: attr for attr, json_name in _JSON_NAMES.items()}


@dataclass
class Car:
    """
    Represents a single car in the registry.

    Attributes:
        image: Image URL or path.
        make: Manufacturer (e.g., 'Toyota').
        model: Model name.
        descript: Free-form description.
        year: Model year.
        color: Exterior color.
        is_new: Whether the car is new or used.
        num_doors: Number of doors.
        worth: Value, stored exactly as provided.
        id: Store-assigned identifier (None until appended).
    """
    image: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    descript: Optional[str] = None
    year: Optional[int] = None
    color: Optional[str] = None
    is_new: Optional[bool] = None
    num_doors: Optional[int] = None
    worth: Any = None
    id: Optional[str] = None

    @staticmethod
    def json_fields() -> list[str]:
        """JSON keys of every field, identifier first."""
        names = [_JSON_NAMES.get(f.name, f.name) for f in fields(Car)]
        names.remove("_id")
        return ["_id"] + names

    @staticmethod
    def editable_fields() -> list[str]:
        """JSON keys a client may set; the identifier is never editable."""
        return Car.json_fields()[1:]

    def apply(self, changes: dict) -> list[str]:
        """
        Shallow-merge the known, editable keys of `changes` onto this car.

        Keys absent from `changes` keep their current values.

        Returns:
            The JSON keys that were applied.
        """
        applied = []
        for key in self.editable_fields():
            if key in changes:
                setattr(self, _ATTR_NAMES.get(key, key), changes[key])
                applied.append(key)
        return applied

    def to_dict(self) -> dict:
        """Serialize to the JSON record shape."""
        return {key: getattr(self, _ATTR_NAMES.get(key, key)) for key in self.json_fields()}

    def __str__(self) -> str:
        return f"#{self.id} | {self.year} {self.make} {self.model}"
