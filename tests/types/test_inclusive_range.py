from __future__ import annotations

import dataclasses
from typing import Tuple

import pytest

from range_rover.types.inclusive_range import InclusiveRange
from range_rover.util.ints import uint8


def test_from_pair_and_as_tuple() -> None:
    r = InclusiveRange.from_pair((3, 7))
    assert r == InclusiveRange(start=3, end=7)
    assert r.as_tuple() == (3, 7)


def test_frozen() -> None:
    r = InclusiveRange(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.start = 0  # type: ignore[misc]


def test_hashable() -> None:
    assert len({InclusiveRange(1, 2), InclusiveRange(1, 2), InclusiveRange(1, 3)}) == 2


def test_contains() -> None:
    r = InclusiveRange(-2, 2)
    assert -2 in r
    assert 0 in r
    assert 2 in r
    assert 3 not in r
    assert -3 not in r
    assert "1" not in r


def test_len_and_iter() -> None:
    r = InclusiveRange(4, 8)
    assert len(r) == 5
    assert list(r) == [4, 5, 6, 7, 8]
    assert r.to_range() == range(4, 9)

    single = InclusiveRange(6, 6)
    assert len(single) == 1
    assert list(single) == [6]


def test_empty() -> None:
    r = InclusiveRange(5, 3)
    assert r.is_empty
    assert len(r) == 0
    assert list(r) == []
    assert 4 not in r
    assert not InclusiveRange(3, 3).is_empty


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((0, 3), (4, 9), True),
        ((4, 9), (0, 3), True),
        ((0, 3), (5, 9), False),
        ((0, 5), (3, 9), False),
        ((0, 3), (0, 3), False),
        ((5, 3), (4, 9), False),
    ],
)
def test_is_adjacent_to(first: Tuple[int, int], second: Tuple[int, int], expected: bool) -> None:
    assert InclusiveRange.from_pair(first).is_adjacent_to(InclusiveRange.from_pair(second)) is expected


def test_is_adjacent_to_saturates() -> None:
    top = InclusiveRange(uint8(250), uint8(255))
    bottom = InclusiveRange(uint8(0), uint8(3))
    assert not top.is_adjacent_to(bottom, uint8)
    assert not bottom.is_adjacent_to(top, uint8)
    assert top.is_adjacent_to(InclusiveRange(uint8(240), uint8(249)), uint8)
    assert not top.is_adjacent_to(top, uint8)
