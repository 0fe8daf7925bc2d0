from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

from docstore.locks import CollectionLockRegistry


def test_same_collection_returns_same_lock():
    registry = CollectionLockRegistry()

    assert registry.lock_for("fish") is registry.lock_for("fish")
    assert registry.lock_for("fish") is not registry.lock_for("birds")
    assert len(registry) == 2
    assert "fish" in registry


def test_concurrent_first_use_converges_on_one_lock():
    registry = CollectionLockRegistry()
    barrier = threading.Barrier(16)

    def grab(_: int) -> threading.Lock:
        barrier.wait()
        return registry.lock_for("fish")

    with ThreadPoolExecutor(max_workers=16) as pool:
        locks = list(pool.map(grab, range(16)))

    assert len({id(lock) for lock in locks}) == 1
    assert len(registry) == 1


def test_creating_a_lock_leaves_it_released():
    registry = CollectionLockRegistry()

    lock = registry.lock_for("fish")

    assert not lock.locked()
    with lock:
        assert lock.locked()
