"""A small, file-backed car inventory with a fixed capacity."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from .car import Car, Engine

MAX_CARS = 10
DEFAULT_PATH = "cars.txt"


class InventoryFullError(Exception):
    """Raised when a car is added to an inventory that is already full."""


def _parse_stored_price(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text.strip())
    except ValueError:
        return None


class CarManager:
    """Holds up to :data:`MAX_CARS` cars and keeps them in a text file.

    The file stores four lines per car: make, model, price and engine type.
    Every change is written back at once.
    """

    max_cars = MAX_CARS

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._cars: list[Car] = []
        self.load()

    def __len__(self) -> int:
        return len(self._cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(list(self._cars))

    def add_car(self, make: str, model: str, price: float, engine_type: str) -> Car:
        """Add a car and save; raise InventoryFullError when there is no room."""
        if len(self._cars) >= self.max_cars:
            raise InventoryFullError(f"Inventory Full (Max {self.max_cars})!")
        car = Car(make, model, float(price), Engine(engine_type))
        self._cars.append(car)
        self.save()
        return car

    def delete_car(self, index: int) -> None:
        """Remove the car at index and save; an index out of range is ignored."""
        if not 0 <= index < len(self._cars):
            return
        del self._cars[index]
        self.save()

    def get_car(self, index: int) -> Car | None:
        """Return the car at index, or None if there is none."""
        if 0 <= index < len(self._cars):
            return self._cars[index]
        return None

    def load(self) -> None:
        """Replace the inventory with the file's contents, if the file exists."""
        try:
            with self.path.open(encoding="utf-8") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except FileNotFoundError:
            return

        self._cars.clear()
        records = iter(lines)
        for make in records:
            if len(self._cars) >= self.max_cars:
                break
            if not make:
                continue
            try:
                model = next(records)
                price_text = next(records)
            except StopIteration:
                break
            engine_type = next(records, "")
            price = _parse_stored_price(price_text)
            if price is None:
                break
            self._cars.append(Car(make, model, price, Engine(engine_type)))

    def save(self) -> None:
        """Write the whole inventory to the file."""
        with self.path.open("w", encoding="utf-8", newline="\n") as handle:
            for car in self._cars:
                handle.write(f"{car.make}\n{car.model}\n{car.price:g}\n{car.engine_type}\n")