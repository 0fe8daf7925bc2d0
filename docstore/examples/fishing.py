from __future__ import annotations

from pydantic import BaseModel

from ..driver import Driver

COLLECTION = "fish"


class Fish(BaseModel):
    name: str
    type: str | None = None


class FishingExample:
    """Stores fish under the "fish" collection, one resource per fish name."""

    def __init__(self, db: Driver):
        self._db = db

    def write_fish(self, name: str, type: str | None = None) -> Fish:
        fish = Fish(name=name, type=type)
        self._db.write(COLLECTION, name, fish)
        return fish

    def read_fish(self, name: str) -> Fish:
        return self._db.read(COLLECTION, name, Fish)

    def read_all_fish(self) -> list[Fish]:
        return [Fish.model_validate_json(raw) for raw in self._db.read_all(COLLECTION)]

    def delete_fish(self, name: str) -> None:
        self._db.delete(COLLECTION, name)

    def delete_all_fish(self) -> None:
        self._db.delete(COLLECTION, "")
