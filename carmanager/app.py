"""Tkinter front end: a login window and the inventory dashboard."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Iterable
from pathlib import Path

from .auth import AuthenticationError, Role, authenticate
from .car import Car
from .inventory import DEFAULT_PATH, CarManager, InventoryFullError

_BACKGROUND = "#2b2b2b"
_FOREGROUND = "white"
_FONT = "Arial -14"
_BOLD_FONT = "Arial -14 bold"
_TITLE_FONT = "Arial -18 bold"
_TITLE_COLOR = "#3498db"
_GROUP_TITLE_COLOR = "#aaaaaa"

# (normal, hover) colours for each button style.
_BUTTON_COLORS = {
    "blue": ("#3498db", "#2980b9"),
    "green": ("#27ae60", "#2ecc71"),
    "red": ("#c0392b", "#e74c3c"),
    "purple": ("#8e44ad", "#9b59b6"),
}


def format_listing(car: Car) -> str:
    """Return the line shown for a car in the inventory list."""
    dollars = int(car.price) if math.isfinite(car.price) else 0
    return f"{car.make} {car.model} [{car.engine_type}] - ${dollars}"


def filter_cars(cars: Iterable[Car], query: str) -> list[Car]:
    """Return the cars that match the query; an empty query keeps them all."""
    if not query:
        return list(cars)
    return [car for car in cars if car.matches(query)]


def parse_price(text: str) -> float:
    """Read a price typed by the user; text that is not a number gives 0."""
    if "_" in text:
        return 0.0
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _apply_theme(root) -> None:
    options = {
        "*Background": _BACKGROUND,
        "*Foreground": _FOREGROUND,
        "*Font": _FONT,
        "*Entry.Background": "#404040",
        "*Entry.Foreground": "#dddddd",
        "*Entry.insertBackground": _FOREGROUND,
        "*Entry.relief": "flat",
        "*Listbox.Background": "#333333",
        "*Listbox.relief": "flat",
        "*Button.Font": _BOLD_FONT,
        "*Button.relief": "flat",
        "*LabelFrame.Font": _BOLD_FONT,
    }
    for pattern, value in options.items():
        root.option_add(pattern, value)


def _button(parent, text: str, command: Callable[[], None], style: str = "blue"):
    import tkinter as tk

    normal, hover = _BUTTON_COLORS[style]
    return tk.Button(
        parent,
        text=text,
        command=command,
        background=normal,
        activebackground=hover,
        foreground=_FOREGROUND,
        activeforeground=_FOREGROUND,
        padx=8,
        pady=8,
    )


def _labelled_entry(parent, label: str, **entry_options):
    import tkinter as tk

    tk.Label(parent, text=label, anchor="w").pack(fill="x")
    entry = tk.Entry(parent, **entry_options)
    entry.pack(fill="x", pady=(0, 8), ipady=5)
    return entry


class LoginWindow:
    """Asks for a user name and password and reports the granted role."""

    def __init__(self, root, on_success: Callable[[Role], None]) -> None:
        import tkinter as tk

        self.root = root
        self.on_success = on_success
        root.title("Login")
        root.geometry("320x260")

        frame = tk.Frame(root, padx=15, pady=15)
        frame.pack(fill="both", expand=True)

        tk.Label(frame, text="System Login", font=_TITLE_FONT, foreground=_TITLE_COLOR).pack(
            pady=(0, 15)
        )
        self.username_entry = _labelled_entry(frame, "Username")
        self.masked_entry = _labelled_entry(frame, "Password", show="*")
        _button(frame, "Login", self.process_login).pack(fill="x", pady=(7, 0))

        root.bind("<Return>", lambda _event: self.process_login())
        self.username_entry.focus_set()

    def process_login(self) -> None:
        """Check the entered credentials; open the dashboard or warn."""
        from tkinter import messagebox

        try:
            role = authenticate(self.username_entry.get(), self.masked_entry.get())
        except AuthenticationError as exc:
            messagebox.showwarning("Error", str(exc), parent=self.root)
            return
        self.on_success(role)
        self.root.destroy()


class MainWindow:
    """Lists the inventory; administrators may also add and delete cars."""

    def __init__(self, root, manager: CarManager, role: Role) -> None:
        import tkinter as tk

        self.root = root
        self.manager = manager
        self.role = role
        root.title("Car Management System")
        root.geometry("500x650")

        main = tk.Frame(root, padx=10, pady=10)
        main.pack(fill="both", expand=True)

        top = tk.Frame(main)
        top.pack(fill="x", pady=(0, 8))
        self.search_entry = tk.Entry(top)
        self.search_entry.pack(side="left", fill="x", expand=True, ipady=5, padx=(0, 6))
        self.search_entry.bind("<Return>", lambda _event: self._search())
        _button(top, "Search", self._search, "purple").pack(side="left", padx=(0, 6))
        _button(top, "Show All", lambda: self.refresh_list("")).pack(side="left")

        self.listbox = tk.Listbox(main, activestyle="none", exportselection=False)
        self.listbox.pack(fill="both", expand=True, pady=(0, 8))

        self.admin_box = tk.LabelFrame(
            main, text="Admin Controls", foreground=_GROUP_TITLE_COLOR, labelanchor="n", padx=10, pady=10
        )
        tk.Label(self.admin_box, text="Details:", anchor="w").pack(fill="x")
        self.make_entry = _labelled_entry(self.admin_box, "Make")
        self.model_entry = _labelled_entry(self.admin_box, "Model")
        self.price_entry = _labelled_entry(self.admin_box, "Price")
        self.engine_entry = _labelled_entry(self.admin_box, "Engine Type")
        _button(self.admin_box, "Add Car", self.add_car, "green").pack(fill="x", pady=(4, 4))
        _button(self.admin_box, "Delete Selected", self.delete_selected, "red").pack(fill="x")

        if role is Role.ADMIN:
            self.admin_box.pack(fill="x")

        self.refresh_list("")

    def _search(self) -> None:
        self.refresh_list(self.search_entry.get())

    def refresh_list(self, query: str) -> None:
        """Show the cars that match the query, or all of them."""
        self.listbox.delete(0, "end")
        for car in filter_cars(self.manager, query):
            self.listbox.insert("end", format_listing(car))

    def add_car(self) -> None:
        """Add a car from the detail fields, which need a make and a model."""
        from tkinter import messagebox

        make = self.make_entry.get()
        model = self.model_entry.get()
        if not make or not model:
            return
        try:
            self.manager.add_car(
                make, model, parse_price(self.price_entry.get()), self.engine_entry.get()
            )
        except InventoryFullError:
            messagebox.showwarning(
                "Full", f"Inventory Full (Max {self.manager.max_cars})!", parent=self.root
            )
            return
        messagebox.showinfo("Success", "Car Added!", parent=self.root)
        for entry in (self.make_entry, self.model_entry, self.price_entry, self.engine_entry):
            entry.delete(0, "end")
        self.refresh_list("")

    def delete_selected(self) -> None:
        """Delete the car in the selected row of the list."""
        from tkinter import messagebox

        selection = self.listbox.curselection()
        if not selection:
            messagebox.showwarning("Error", "Select a car to delete.", parent=self.root)
            return
        self.manager.delete_car(selection[0])
        self.refresh_list("")


def main(argv: list[str] | None = None) -> int:
    """Start the login window and, after a successful login, the dashboard."""
    parser = argparse.ArgumentParser(prog="carmanager", description="Car management system.")
    parser.add_argument(
        "--data",
        type=Path,
        default=Path(DEFAULT_PATH),
        help=f"inventory file (default: {DEFAULT_PATH})",
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    manager = CarManager(args.data)
    root = tk.Tk()
    root.withdraw()
    _apply_theme(root)

    def start(role: Role) -> None:
        window = tk.Toplevel(root)
        window.protocol("WM_DELETE_WINDOW", root.destroy)
        MainWindow(window, manager, role)

    login = tk.Toplevel(root)
    login.protocol("WM_DELETE_WINDOW", root.destroy)
    LoginWindow(login, start)
    root.mainloop()
    return 0