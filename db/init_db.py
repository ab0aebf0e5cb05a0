"""
db/init_db.py
-------------
The fixture data set the car store is seeded and reset with.
Every call builds fresh Car objects, so mutations made during one
scenario never leak into the next reset.
"""

from models.car import Car

FIXTURE_CARS: tuple[dict, ...] = (
    {
        "id": "5a1f0c3e9b2d4e01a7c3f001",
        "image": "https://images.example.com/cars/corolla.jpg",
        "make": "Toyota",
        "model": "Corolla",
        "descript": "Reliable compact sedan, one owner.",
        "year": 2015,
        "color": "silver",
        "is_new": False,
        "num_doors": 4,
        "worth": 9500,
    },
    {
        "id": "5a1f0c3e9b2d4e01a7c3f002",
        "image": "https://images.example.com/cars/mustang.jpg",
        "make": "Ford",
        "model": "Mustang",
        "descript": "V8 coupe with manual transmission.",
        "year": 2019,
        "color": "red",
        "is_new": False,
        "num_doors": 2,
        "worth": 28000,
    },
    {
        "id": "5a1f0c3e9b2d4e01a7c3f003",
        "image": "https://images.example.com/cars/civic.jpg",
        "make": "Honda",
        "model": "Civic",
        "descript": "Hatchback, low mileage.",
        "year": 2021,
        "color": "blue",
        "is_new": True,
        "num_doors": 5,
        "worth": 23000,
    },
    {
        "id": "5a1f0c3e9b2d4e01a7c3f004",
        "image": "https://images.example.com/cars/golf.jpg",
        "make": "Volkswagen",
        "model": "Golf",
        "descript": "Diesel, full service history.",
        "year": 2012,
        "color": "black",
        "is_new": False,
        "num_doors": 5,
        "worth": 6200,
    },
    {
        "id": "5a1f0c3e9b2d4e01a7c3f005",
        "image": "https://images.example.com/cars/model3.jpg",
        "make": "Tesla",
        "model": "Model 3",
        "descript": "Long range, autopilot included.",
        "year": 2023,
        "color": "white",
        "is_new": True,
        "num_doors": 4,
        "worth": 41000,
    },
)


def fixture_cars() -> list[Car]:
    """Return new Car objects for the fixture set, in fixture order."""
    return [Car(**row) for row in FIXTURE_CARS]
