"""Car records and the engine they are built with."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_ENGINE_TYPE = "Standard"


@dataclass
class Engine:
    """The engine fitted to a car."""

    type: str = DEFAULT_ENGINE_TYPE


@dataclass
class Car:
    """A car in the inventory.

    The engine may be given as an :class:`Engine` or as its type name.
    """

    make: str
    model: str
    price: float
    engine: Engine | str = field(default_factory=Engine)

    def __post_init__(self) -> None:
        if isinstance(self.engine, str):
            self.engine = Engine(self.engine)

    @property
    def engine_type(self) -> str:
        """The type name of the car's engine."""
        return self.engine.type

    def matches(self, query: str) -> bool:
        """Return True if the query occurs in the make or model, ignoring case."""
        needle = query.lower()
        return needle in self.make.lower() or needle in self.model.lower()