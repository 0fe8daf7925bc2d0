from __future__ import annotations

import argparse
import logging
import sys
import time

from .driver import Driver
from .errors import DocstoreError
from .examples import FishingExample, PeopleExample
from .log import ConsoleLogger
from .settings import Options

FISH = (("onefish", None), ("twofish", None), ("redfish", "red"), ("bluefish", "blue"))


def run_fishing(db: Driver) -> None:
    example = FishingExample(db)

    for name, kind in FISH:
        example.write_fish(name, kind)

    print("Read fish:", example.read_fish("onefish"))
    print("Read all fish:", example.read_all_fish())

    example.delete_fish("onefish")
    example.delete_all_fish()


def run_people(db: Driver, count: int, seed: int | None) -> None:
    example = PeopleExample(db)
    started = time.monotonic()

    people = example.generate_fake_people(count, seed=seed)
    example.write_people(people)
    if people:
        example.delete_person(people[0].name)

    print(f"Stored people: {example.count()}")
    print(f"Time elapsed: {time.monotonic() - started:.3f}s")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="docstore", description="Demo flows for the JSON document store")
    parser.add_argument("demo", choices=("fishing", "people"), help="Which demo to run")
    parser.add_argument("--root", default="./data", help="Database root directory")
    parser.add_argument("--count", type=int, default=1000, help="Fake people to generate (people demo)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for fake data")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at debug level")
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO

    try:
        db = Driver(args.root, Options(logger=ConsoleLogger(level)))
        if args.demo == "fishing":
            run_fishing(db)
        else:
            run_people(db, args.count, args.seed)
    except DocstoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
