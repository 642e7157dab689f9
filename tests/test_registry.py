from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from shortids.registry import UniquenessRegistry


def test_first_request_returns_base_then_numbers():
    registry = UniquenessRegistry()

    assert [registry.ensure_unique("item") for _ in range(3)] == ["item", "item_2", "item_3"]


def test_numbering_skips_literally_reserved_forms():
    registry = UniquenessRegistry()

    assert registry.ensure_unique("x_2") == "x_2"
    assert [registry.ensure_unique("x") for _ in range(3)] == ["x", "x_3", "x_4"]


def test_custom_delimiter_in_numbers():
    registry = UniquenessRegistry(delimiter="-")

    registry.ensure_unique("a")
    assert registry.ensure_unique("a") == "a-2"


def test_inspection_helpers():
    registry = UniquenessRegistry()
    registry.ensure_unique("a")
    registry.ensure_unique("a")

    assert registry.usage("a") == 2
    assert registry.usage("missing") == 0
    assert registry.contains("a_2")
    assert "a" in registry
    assert "b" not in registry
    assert len(registry) == 2


def test_reset_clears_counters_and_issued_ids():
    registry = UniquenessRegistry()
    registry.ensure_unique("a")
    registry.ensure_unique("a")

    registry.reset()

    assert len(registry) == 0
    assert registry.usage("a") == 0
    assert registry.ensure_unique("a") == "a"


def test_concurrent_requests_never_collide():
    registry = UniquenessRegistry()

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda _: registry.ensure_unique("parallel"), range(1000)))

    assert len(set(results)) == 1000
    assert "parallel" in results
    assert "parallel_1000" in results
