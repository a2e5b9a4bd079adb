"""Tests for the in-memory obstacle store."""

import pytest
from pydantic import ValidationError

from shelfmap.config import Config
from shelfmap.errors import InvalidGrid, ObstacleNotFound, PlacementRejected
from shelfmap.store import ObstacleStore


@pytest.fixture
def store(monkeypatch):
    monkeypatch.setattr(Config, "SHELF_WIDTH", 2)
    monkeypatch.setattr(Config, "SHELF_HEIGHT", 1)
    return ObstacleStore(10, 6)


def test_add_uses_default_shelf_footprint(store):
    shelf = store.add(1, 1)

    assert (shelf.w, shelf.h) == (2, 1)
    assert shelf.obstacle_id == "0"
    assert shelf.label == "Shelf 1"
    assert store.get("0") == shelf
    assert len(store) == 1


def test_add_rejects_overlap_and_reports_conflict(store):
    store.add(1, 1, 3, 2, label="Dairy")

    with pytest.raises(PlacementRejected) as excinfo:
        store.add(2, 2)
    assert excinfo.value.conflict_id == "0"
    assert "Dairy" in excinfo.value.reason
    assert len(store) == 1


def test_adjacent_shelves_are_allowed(store):
    store.add(0, 0)
    store.add(2, 0)
    store.add(0, 1)
    assert [o.obstacle_id for o in store.obstacles] == ["0", "1", "2"]


def test_add_rejects_out_of_bounds(store):
    with pytest.raises(PlacementRejected) as excinfo:
        store.add(9, 0)
    assert excinfo.value.conflict_id is None

    with pytest.raises(ValidationError):
        store.add(-1, 0)


def test_rejected_add_does_not_consume_an_id(store):
    store.add(0, 0)
    with pytest.raises(PlacementRejected):
        store.add(1, 0)
    second = store.add(4, 0)
    assert second.obstacle_id == "1"


def test_move_and_resize(store):
    shelf = store.add(0, 0)
    other = store.add(5, 0)

    moved = store.move(shelf.obstacle_id, 1, 0)  # overlaps its own old cells only
    assert moved.origin == (1, 0)

    with pytest.raises(PlacementRejected):
        store.move(shelf.obstacle_id, 4, 0)
    assert store.get(shelf.obstacle_id).origin == (1, 0)

    resized = store.resize(other.obstacle_id, 3, 4)
    assert (resized.w, resized.h) == (3, 4)
    assert [o.obstacle_id for o in store.obstacles] == ["0", "1"]

    with pytest.raises(PlacementRejected):
        store.resize(shelf.obstacle_id, 5, 1)


def test_remove_and_missing_ids(store):
    shelf = store.add(0, 0)
    removed = store.remove(shelf.obstacle_id)
    assert removed == shelf
    assert len(store) == 0

    with pytest.raises(ObstacleNotFound):
        store.get(shelf.obstacle_id)
    with pytest.raises(ObstacleNotFound):
        store.move("missing", 0, 0)
    with pytest.raises(ObstacleNotFound):
        store.remove("missing")


def test_snapshot_is_frozen_against_later_edits(store):
    shelf = store.add(0, 0)
    before = store.snapshot()
    assert not before.is_traversable(0, 0)

    store.move(shelf.obstacle_id, 3, 3)
    after = store.snapshot()

    assert not before.is_traversable(0, 0)
    assert after.is_traversable(0, 0)
    assert not after.is_traversable(3, 3)


def test_store_rejects_invalid_dimensions():
    with pytest.raises(InvalidGrid):
        ObstacleStore(0, 5)
