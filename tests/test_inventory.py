import pytest

from carmanager.car import Car, Engine
from carmanager.inventory import MAX_CARS, CarManager, InventoryFullError


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "cars.txt"


def test_missing_file_gives_empty_inventory(data_file):
    manager = CarManager(data_file)
    assert len(manager) == 0
    assert list(manager) == []
    assert not data_file.exists()


def test_add_car_writes_four_lines(data_file):
    manager = CarManager(data_file)
    manager.add_car("Toyota", "Corolla", 25000, "V6")
    assert data_file.read_text(encoding="utf-8") == "Toyota\nCorolla\n25000\nV6\n"


def test_add_car_returns_car(data_file):
    manager = CarManager(data_file)
    car = manager.add_car("Honda", "Civic", 20000.5, "Standard")
    assert car == Car("Honda", "Civic", 20000.5, Engine("Standard"))
    assert manager.get_car(0) == car


def test_round_trip_through_file(data_file):
    manager = CarManager(data_file)
    manager.add_car("Toyota", "Corolla", 25000, "V6")
    manager.add_car("Ford", "Mustang", 40000.5, "V8")
    reloaded = CarManager(data_file)
    assert list(reloaded) == list(manager)


def test_large_price_uses_six_significant_digits(data_file):
    manager = CarManager(data_file)
    manager.add_car("Rolls", "Phantom", 1234567, "V12")
    assert data_file.read_text(encoding="utf-8").splitlines()[2] == "1.23457e+06"


def test_inventory_full_raises(data_file):
    manager = CarManager(data_file)
    for number in range(MAX_CARS):
        manager.add_car(f"Make{number}", f"Model{number}", number, "Standard")
    with pytest.raises(InventoryFullError):
        manager.add_car("Extra", "Car", 1, "Standard")
    assert len(manager) == MAX_CARS
    assert len(CarManager(data_file)) == MAX_CARS


def test_delete_shifts_remaining_cars(data_file):
    manager = CarManager(data_file)
    for make in ("A", "B", "C"):
        manager.add_car(make, "X", 1, "Standard")
    manager.delete_car(1)
    assert [car.make for car in manager] == ["A", "C"]
    assert [car.make for car in CarManager(data_file)] == ["A", "C"]


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_delete_out_of_range_is_ignored(data_file, index):
    manager = CarManager(data_file)
    manager.add_car("A", "X", 1, "Standard")
    manager.add_car("B", "Y", 2, "Standard")
    manager.delete_car(index)
    assert [car.make for car in manager] == ["A", "B"]


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_get_car_out_of_range_is_none(data_file, index):
    manager = CarManager(data_file)
    manager.add_car("A", "X", 1, "Standard")
    assert manager.get_car(index) is None


def test_load_skips_blank_lines_between_records(data_file):
    data_file.write_text(
        "\n\nHonda\nCivic\n20000\nStandard\n\nFord\nKa\n9000\nPetrol\n",
        encoding="utf-8",
    )
    manager = CarManager(data_file)
    assert [(car.make, car.model, car.price, car.engine_type) for car in manager] == [
        ("Honda", "Civic", 20000.0, "Standard"),
        ("Ford", "Ka", 9000.0, "Petrol"),
    ]


def test_load_accepts_padded_price(data_file):
    data_file.write_text("Honda\nCivic\n  19999.5 \nStandard\n", encoding="utf-8")
    manager = CarManager(data_file)
    assert manager.get_car(0).price == 19999.5


def test_load_stops_at_capacity(data_file):
    records = "".join(f"Make{n}\nModel{n}\n{n}\nStandard\n" for n in range(MAX_CARS + 2))
    data_file.write_text(records, encoding="utf-8")
    manager = CarManager(data_file)
    assert len(manager) == MAX_CARS
    assert manager.get_car(MAX_CARS - 1).make == f"Make{MAX_CARS - 1}"


def test_load_stops_at_unreadable_price(data_file):
    data_file.write_text(
        "Honda\nCivic\n20000\nStandard\nFord\nKa\nnot-a-price\nPetrol\n",
        encoding="utf-8",
    )
    manager = CarManager(data_file)
    assert [car.make for car in manager] == ["Honda"]


def test_load_replaces_current_cars(data_file):
    manager = CarManager(data_file)
    manager.add_car("A", "X", 1, "Standard")
    data_file.write_text("B\nY\n2\nDiesel\n", encoding="utf-8")
    manager.load()
    assert [car.make for car in manager] == ["B"]


def test_iteration_is_a_snapshot(data_file):
    manager = CarManager(data_file)
    manager.add_car("A", "X", 1, "Standard")
    manager.add_car("B", "Y", 2, "Standard")
    seen = []
    for car in manager:
        seen.append(car.make)
        manager.delete_car(0)
    assert seen == ["A", "B"]
    assert len(manager) == 0