import pytest

from models.errors import NotFoundError, ValidationError
from repositories.car_repo import CarRepository
from services.car_service import CarService


@pytest.fixture
def service(repo: CarRepository) -> CarService:
    return CarService(repo)


def test_get_car_raises_not_found(service: CarService) -> None:
    with pytest.raises(NotFoundError) as exc:
        service.get_car("missing")

    assert exc.value.status == 404
    assert str(exc.value) == "Could not find the car you requested."


@pytest.mark.parametrize("body", [None, {}, [], "make=Audi"])
def test_create_car_rejects_missing_or_malformed_body(service: CarService, body) -> None:
    with pytest.raises(ValidationError):
        service.create_car(body)


def test_update_without_body_leaves_car_unchanged(service: CarService, repo: CarRepository) -> None:
    target = repo.list_all()[0]
    before = target.to_dict()

    updated = service.update_car(target.id, None)

    assert updated.to_dict() == before


def test_remove_car_raises_for_unknown_id(service: CarService, repo: CarRepository) -> None:
    with pytest.raises(NotFoundError):
        service.remove_car("missing")
    assert len(repo) == 5


@pytest.mark.parametrize("body", [{"wheels": 4}, {"_id": "x"}])
def test_create_car_rejects_body_without_car_fields(
    service: CarService, repo: CarRepository, body
) -> None:
    with pytest.raises(ValidationError):
        service.create_car(body)
    assert len(repo) == 5
