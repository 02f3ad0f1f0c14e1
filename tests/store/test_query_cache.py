from __future__ import annotations

from src.hr_console.hr_console.store.cache import QueryCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_second_read_is_served_from_cache():
    cache = QueryCache()
    calls = []

    def loader():
        calls.append(1)
        return [1, 2, 3]

    assert cache.get_or_load("employees", loader) == [1, 2, 3]
    assert cache.get_or_load("employees", loader) == [1, 2, 3]
    assert len(calls) == 1
    assert cache.is_cached("employees")


def test_invalidate_forces_a_fresh_read():
    cache = QueryCache()
    data = {"rows": ["a"]}

    assert cache.get_or_load("jobs", lambda: list(data["rows"])) == ["a"]
    data["rows"] = ["a", "b"]
    cache.invalidate("jobs")

    assert not cache.is_cached("jobs")
    assert cache.get_or_load("jobs", lambda: list(data["rows"])) == ["a", "b"]


def test_invalidate_only_touches_named_keys():
    cache = QueryCache()
    cache.get_or_load("jobs", lambda: [1])
    cache.get_or_load("employees", lambda: [2])

    cache.invalidate("jobs")

    assert not cache.is_cached("jobs")
    assert cache.is_cached("employees")


def test_ttl_expires_entries():
    clock = FakeClock()
    cache = QueryCache(ttl_seconds=30, clock=clock)
    cache.get_or_load("jobs", lambda: [1])

    clock.now = 29.0
    assert cache.is_cached("jobs")
    clock.now = 30.0
    assert not cache.is_cached("jobs")


def test_load_racing_an_invalidation_is_not_stored():
    cache = QueryCache()

    def loader():
        # a write lands while this read is in flight
        cache.invalidate("jobs")
        return ["stale"]

    assert cache.get_or_load("jobs", loader) == ["stale"]
    assert not cache.is_cached("jobs")


def test_callers_cannot_mutate_cached_rows():
    cache = QueryCache()
    rows = cache.get_or_load("jobs", lambda: [1, 2])
    rows.append(3)

    assert cache.get_or_load("jobs", lambda: []) == [1, 2]


def test_clear_drops_everything():
    cache = QueryCache()
    cache.get_or_load("a", lambda: [1])
    cache.get_or_load("b", lambda: [2])

    cache.clear()

    assert not cache.is_cached("a")
    assert not cache.is_cached("b")
