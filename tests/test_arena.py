import pytest

from geomgraph.arena import Arena
from geomgraph.errors import StaleHandleError
from geomgraph.models import EdgeId, VertexId


def test_insert_and_get():
    arena = Arena(VertexId)
    key = arena.insert_with_key(lambda k: ("payload", k))
    assert isinstance(key, VertexId)
    assert arena.get(key) == ("payload", key)
    assert key in arena
    assert len(arena) == 1


def test_removed_key_is_stale():
    arena = Arena(VertexId)
    key = arena.insert_with_key(lambda k: "a")
    assert arena.remove(key) == "a"
    assert key not in arena
    assert len(arena) == 0
    with pytest.raises(StaleHandleError):
        arena.get(key)
    with pytest.raises(StaleHandleError):
        arena.remove(key)


def test_reused_slot_bumps_generation():
    arena = Arena(VertexId)
    old = arena.insert_with_key(lambda k: "old")
    arena.remove(old)
    new = arena.insert_with_key(lambda k: "new")

    assert new.index == old.index
    assert new.generation == old.generation + 1
    assert new != old
    assert arena.get(new) == "new"
    with pytest.raises(StaleHandleError):
        arena.get(old)


def test_foreign_kind_is_rejected():
    arena = Arena(VertexId)
    key = arena.insert_with_key(lambda k: "v")
    foreign = EdgeId(key.index, key.generation)
    assert foreign != key
    assert foreign not in arena
    with pytest.raises(StaleHandleError):
        arena.get(foreign)


def test_out_of_range_key():
    arena = Arena(VertexId)
    with pytest.raises(StaleHandleError) as info:
        arena.get(VertexId(5, 0))
    assert isinstance(info.value, LookupError)


def test_iteration_is_lazy_and_restartable():
    arena = Arena(VertexId)
    keys = [arena.insert_with_key(lambda k, i=i: i) for i in range(4)]
    arena.remove(keys[1])

    assert list(arena.values()) == [0, 2, 3]
    assert list(arena.values()) == [0, 2, 3]
    assert list(arena.keys()) == [keys[0], keys[2], keys[3]]
    assert dict(arena.items())[keys[2]] == 2
