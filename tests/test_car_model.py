from models.car import Car


def test_to_dict_uses_json_field_names() -> None:
    car = Car(make="Saab", model="900", is_new=False, num_doors=3, id="abc")
    data = car.to_dict()

    assert list(data) == [
        "_id", "image", "make", "model", "descript",
        "year", "color", "isNew", "numDoors", "worth",
    ]
    assert data["_id"] == "abc"
    assert data["isNew"] is False
    assert data["numDoors"] == 3
    assert data["image"] is None


def test_apply_ignores_identifier_and_unknown_keys() -> None:
    car = Car()
    applied = car.apply({"_id": "forged", "make": "Volvo", "wheels": 4, "numDoors": 5})

    assert sorted(applied) == ["make", "numDoors"]
    assert car.id is None
    assert car.make == "Volvo"
    assert car.num_doors == 5
    assert not hasattr(car, "wheels")


def test_apply_only_touches_supplied_fields() -> None:
    car = Car(make="Fiat", model="Panda", year=2010, color="yellow", id="x1")

    applied = car.apply({"model": "Punto", "isNew": True, "_id": "other"})

    assert sorted(applied) == ["isNew", "model"]
    assert car.model == "Punto"
    assert car.is_new is True
    assert car.make == "Fiat"
    assert car.year == 2010
    assert car.id == "x1"


def test_worth_is_stored_as_provided() -> None:
    car = Car()
    car.apply({"worth": "about 3k"})
    assert car.worth == "about 3k"

    car.apply({"worth": 3000.5})
    assert car.worth == 3000.5
