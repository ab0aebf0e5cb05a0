import pytest

from db.init_db import FIXTURE_CARS
from models.car import Car
from models.errors import DuplicateCarError
from repositories.car_repo import CarRepository


def test_reset_loads_five_fixture_cars(repo: CarRepository) -> None:
    assert len(repo) == 5
    assert [c.id for c in repo.list_all()] == [row["id"] for row in FIXTURE_CARS]


def test_reset_discards_changes_made_since_last_reset(repo: CarRepository) -> None:
    first = repo.list_all()[0]
    first.make = "changed"
    repo.append(Car(make="extra"))
    repo.remove_by_id(repo.list_all()[1].id)

    repo.reset()

    assert len(repo) == 5
    assert repo.list_all()[0].make == FIXTURE_CARS[0]["make"]


def test_find_by_id_compares_as_string() -> None:
    store = CarRepository([Car(make="Lada", id=5)])

    assert store.find_by_id(5) is store.find_by_id("5")
    assert store.find_by_id("5").make == "Lada"
    assert store.find_by_id("6") is None


def test_append_assigns_unique_identifier(repo: CarRepository) -> None:
    a = repo.append(Car(make="a"))
    b = repo.append(Car(make="b"))

    assert a.id and b.id and a.id != b.id
    assert repo.list_all()[-1] is b
    assert len(repo) == 7


def test_append_rejects_existing_identifier(repo: CarRepository) -> None:
    existing = repo.list_all()[0].id

    with pytest.raises(DuplicateCarError) as exc:
        repo.append(Car(make="dup", id=existing))

    assert exc.value.status == 409
    assert len(repo) == 5


def test_removed_identifier_cannot_be_reused(repo: CarRepository) -> None:
    removed = repo.list_all()[2].id
    assert repo.remove_by_id(removed) is True

    with pytest.raises(DuplicateCarError):
        repo.append(Car(make="again", id=removed))


def test_remove_unknown_identifier_is_a_no_op(repo: CarRepository) -> None:
    assert repo.remove_by_id("nope") is False
    assert len(repo) == 5
