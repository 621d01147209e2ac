# carmanager

A small desktop application for keeping a car inventory: make, model,
price and engine type. The inventory is held in a plain-text file and is
saved after every change.

## Installing

```
pip install .
```

The graphical interface uses Tkinter from the standard library; no other
packages are needed.

## Running

```
carmanager
```

By default the inventory is kept in `cars.txt` in the working directory.
Another file can be given with `--data`:

```
carmanager --data /path/to/inventory.txt
```

A login window opens first. The accounts are built in: an administrator
account (`admin`) and two accounts with the staff role (`staff` and
`user`). User names are compared without regard to case. Administrators
get the full dashboard with controls for adding and deleting cars; staff
can browse and search the inventory but not change it.

On the dashboard:

- **Search** (or Enter in the search field) filters the list by make or
  model, ignoring case.
- **Show All** lists every car.
- **Add Car** (administrators only) adds a car from the form fields. Make
  and model are required; a price that is not a number is stored as 0.
  The inventory holds at most ten cars.
- **Delete Selected** (administrators only) removes the selected car.

Each car is listed as `Make Model [Engine] - $Price`, with the price shown
as a whole number.

## Using it as a library

```python
from carmanager.inventory import CarManager, InventoryFullError

manager = CarManager("cars.txt")
try:
    manager.add_car("Toyota", "Corolla", 20000.0, "Hybrid")
except InventoryFullError:
    print("Inventory is full")

for car in manager:
    if car.matches("toy"):
        print(car.make, car.model, car.price, car.engine.type)

manager.delete_car(0)
```

- `CarManager(path)` loads the file if it exists. `len(manager)` gives the
  number of cars, iterating yields them in order, and `get_car(index)`
  returns a car or `None`. `delete_car` ignores an index out of range.
  `load()` and `save()` read and write the file explicitly.
- `carmanager.car.Car` is a dataclass with `make`, `model`, `price` and
  `engine`; the engine may be given as an `Engine` or as its type name,
  and `engine_type` returns that name.
- `carmanager.auth.authenticate(username, password)` returns a `Role`
  (`ADMIN` or `STAFF`) for a known account and raises
  `AuthenticationError` otherwise.
- `carmanager.app` holds the windows and the helpers `format_listing`,
  `filter_cars` and `parse_price`.

## Storage format

The inventory file holds four lines per car: make, model, price and engine
type. Blank lines where a make is expected are skipped, at most ten cars
are read, and a price line that is not a number ends the reading.

## What it does not do

Accounts cannot be added or changed; the login list is fixed in the
package. There is no multi-user access: the inventory file is rewritten
whole on every change, with no locking.

## Running the tests

```
pip install .[test]
pytest
```