from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from pydantic import BaseModel, Field

from ..driver import Driver

COLLECTION = "people"

logger = logging.getLogger(__name__)

FIRST_NAMES = (
    "Ada", "Alan", "Barbara", "Claude", "Dennis", "Edsger", "Frances", "Grace",
    "Guido", "Hedy", "Ken", "Linus", "Margaret", "Niklaus", "Radia", "Tim",
)


class Person(BaseModel):
    name: str
    age: int = Field(ge=0)


class PeopleExample:
    def __init__(self, db: Driver):
        self._db = db

    def write_people(self, people: Iterable[Person]) -> int:
        written = 0
        for person in people:
            self._db.write(COLLECTION, person.name, person)
            logger.info("Wrote: %s", person.name)
            written += 1
        return written

    def read_person(self, name: str) -> Person:
        return self._db.read(COLLECTION, name, Person)

    def delete_person(self, name: str) -> None:
        self._db.delete(COLLECTION, name)

    def count(self) -> int:
        return len(self._db.read_all(COLLECTION))

    @staticmethod
    def generate_fake_people(count: int, seed: int | None = None) -> list[Person]:
        """
        Random first names with ages 0-120. Names repeat, so writing the
        result may overwrite earlier people with the same name.
        """
        rng = random.Random(seed)
        return [Person(name=rng.choice(FIRST_NAMES), age=rng.randint(0, 120)) for _ in range(count)]
