import pytest

from handlers.car_handler import CarController
from main import create_app
from repositories.car_repo import CarRepository
from services.car_service import CarService


@pytest.fixture
def repo() -> CarRepository:
    """A store reset to the five fixture cars."""
    store = CarRepository()
    store.reset()
    return store


@pytest.fixture
def controller(repo: CarRepository) -> CarController:
    return CarController(CarService(repo))


@pytest.fixture
def client(repo: CarRepository):
    app = create_app(repo)
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


@pytest.fixture
def new_car_payload() -> dict:
    return {
        "image": "test image",
        "make": "test make",
        "model": "test model",
        "descript": "test descript",
        "year": 2000,
        "color": "test color",
        "isNew": True,
        "numDoors": 4,
        "worth": "test worth",
    }
