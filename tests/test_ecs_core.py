from dataclasses import dataclass

import pytest

from astrocelerate.ecs_core import (
    MAX_COMPONENTS_PER_ENTITY,
    ComponentArray,
    ComponentTypeRegistry,
    Entity,
)
from astrocelerate.logging_manager import EngineError


@dataclass
class Position:
    x: float


@dataclass
class Velocity:
    v: float


def test_insert_and_get():
    arr = ComponentArray()
    arr.insert(3, Position(1.5))
    arr.insert(7, Position(2.5))
    assert arr.get(3) == Position(1.5)
    assert arr.get(7) == Position(2.5)
    assert len(arr) == 2
    assert 3 in arr and 7 in arr
    assert 4 not in arr


def test_duplicate_insert_raises():
    arr = ComponentArray()
    arr.insert(1, Position(0.0))
    with pytest.raises(EngineError):
        arr.insert(1, Position(1.0))
    assert arr.get(1) == Position(0.0)


def test_erase_keeps_other_entities_reachable():
    arr = ComponentArray()
    for eid in range(5):
        arr.insert(eid, Position(float(eid)))
    arr.erase(1)
    assert 1 not in arr
    assert len(arr) == 4
    for eid in (0, 2, 3, 4):
        assert arr.get(eid) == Position(float(eid))
    assert sorted(arr) == [0, 2, 3, 4]


def test_erase_last_and_missing():
    arr = ComponentArray()
    arr.insert(10, Position(1.0))
    arr.erase(99)
    assert len(arr) == 1
    arr.erase(10)
    assert len(arr) == 0
    assert 10 not in arr


def test_update_replaces_component():
    arr = ComponentArray()
    arr.insert(2, Position(1.0))
    arr.update(2, Position(9.0))
    assert arr.get(2) == Position(9.0)


def test_update_missing_raises():
    arr = ComponentArray()
    with pytest.raises(EngineError):
        arr.update(5, Position(1.0))


def test_get_missing_raises():
    arr = ComponentArray()
    with pytest.raises(EngineError):
        arr.get(5)


def test_reinsert_after_erase():
    arr = ComponentArray()
    arr.insert(1, Position(1.0))
    arr.erase(1)
    arr.insert(1, Position(2.0))
    assert arr.get(1) == Position(2.0)


def test_type_ids_are_stable_and_distinct():
    reg = ComponentTypeRegistry()
    first = reg.type_id(Position)
    second = reg.type_id(Velocity)
    assert first != second
    assert reg.type_id(Position) == first
    assert reg.type_id(Velocity) == second
    assert {first, second} == {0, 1}


def test_type_ids_fit_mask_width():
    reg = ComponentTypeRegistry()
    ids = [reg.type_id(type(f"T{i}", (), {})) for i in range(MAX_COMPONENTS_PER_ENTITY)]
    assert ids == list(range(MAX_COMPONENTS_PER_ENTITY))


def test_entity_equality_and_hash():
    a = Entity(id=4, version=1, name="probe")
    b = Entity(id=4, version=1, name="probe")
    c = Entity(id=4, version=1, name="other")
    assert a == b
    assert a != c
    assert hash(a) == hash(b)
    assert hash(a) == hash(c)
    assert len({a, b}) == 1