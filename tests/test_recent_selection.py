"""Tests for the recent selection memory."""

import json

from meal_planner.services.recent import InMemoryKeyValueStore, RecentSelectionMemory


class _BrokenStore:
    def get(self, key: str) -> str | None:
        raise RuntimeError("storage offline")

    def set(self, key: str, value: str) -> None:
        raise RuntimeError("storage offline")


def test_load_returns_empty_set_when_absent(memory: RecentSelectionMemory) -> None:
    assert memory.load() == set()


def test_save_then_load(
    memory: RecentSelectionMemory, store: InMemoryKeyValueStore
) -> None:
    memory.save(["3", "1", "2"])

    assert memory.load() == {"1", "2", "3"}
    assert json.loads(store.get("lastAcceptedMeals") or "") == ["3", "1", "2"]


def test_load_ignores_unparseable_value(store: InMemoryKeyValueStore) -> None:
    store.set("lastAcceptedMeals", "{not json")

    assert RecentSelectionMemory(store=store).load() == set()


def test_load_ignores_non_list_value(store: InMemoryKeyValueStore) -> None:
    store.set("lastAcceptedMeals", json.dumps({"ids": ["1"]}))

    assert RecentSelectionMemory(store=store).load() == set()


def test_load_skips_non_string_items(store: InMemoryKeyValueStore) -> None:
    store.set("lastAcceptedMeals", json.dumps(["1", None, 4, {"id": 5}]))

    assert RecentSelectionMemory(store=store).load() == {"1", "4"}


def test_load_fails_soft_when_store_errors() -> None:
    memory = RecentSelectionMemory(store=_BrokenStore())

    assert memory.load() == set()


def test_custom_slot_name(store: InMemoryKeyValueStore) -> None:
    memory = RecentSelectionMemory(store=store, key="plan:last")

    memory.save(["7"])

    assert store.get("plan:last") == '["7"]'
    assert store.get("lastAcceptedMeals") is None
