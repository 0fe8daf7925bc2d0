from __future__ import annotations

from .fishing import Fish, FishingExample
from .people import PeopleExample, Person

__all__ = ["Fish", "FishingExample", "Person", "PeopleExample"]
