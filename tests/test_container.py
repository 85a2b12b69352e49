"""Tests for container wiring."""

from collections.abc import Iterator
from threading import Thread

import pytest

from memory_cache.config import Settings
from memory_cache.containers import (
    build_container,
    default_container,
    reset_default_container,
)


@pytest.fixture
def fresh_default() -> Iterator[None]:
    reset_default_container()
    yield
    reset_default_container()


def test_build_container_shares_one_store(settings: Settings) -> None:
    container = build_container(settings)

    assert container.pool.store is container.store
    assert container.simple_cache.store is container.store


def test_build_container_returns_independent_stores(settings: Settings) -> None:
    first = build_container(settings)
    second = build_container(settings)

    first.simple_cache.set("a", 1)

    assert not second.simple_cache.has("a")


def test_build_container_applies_debug_setting() -> None:
    container = build_container(Settings(debug=True))

    assert container.pool.debug
    assert container.simple_cache.debug


@pytest.mark.usefixtures("fresh_default")
def test_default_container_is_built_once() -> None:
    results = []

    def fetch() -> None:
        results.append(default_container())

    threads = [Thread(target=fetch) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(result is results[0] for result in results)


@pytest.mark.usefixtures("fresh_default")
def test_reset_default_container() -> None:
    first = default_container()
    first.simple_cache.set("a", 1)

    reset_default_container()

    assert default_container() is not first
    assert not default_container().simple_cache.has("a")
