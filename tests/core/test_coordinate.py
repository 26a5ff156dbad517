import dataclasses

import pytest

from grid_astar.core.coordinate import Coordinate


def test_value_equality_and_hash():
    a = Coordinate(2, 3)
    b = Coordinate(2, 3)
    assert a == b
    assert hash(a) == hash(b)
    assert {a: "x"}[b] == "x"
    assert Coordinate(3, 2) != a


def test_key_is_stable_pair():
    assert Coordinate(4, 1).key() == (4, 1)


def test_manhattan_distance():
    assert Coordinate(0, 0).dist(Coordinate(3, 4)) == 7
    assert Coordinate(5, 1).dist(Coordinate(2, 6)) == 8
    assert Coordinate(1, 1).dist(Coordinate(1, 1)) == 0


def test_offset_and_str():
    assert Coordinate(1, 1).offset(0, -1) == Coordinate(1, 0)
    assert str(Coordinate(3, 7)) == "(Col 3, Row 7)"


def test_is_immutable():
    c = Coordinate(0, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.x = 5  # type: ignore[misc]
