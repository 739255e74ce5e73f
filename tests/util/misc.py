from __future__ import annotations

from typing import Collection, List, Tuple, Union

import pytest
from typing_extensions import Protocol

from range_rover.types.inclusive_range import InclusiveRange

# https://github.com/pytest-dev/pytest/blob/7.3.1/src/_pytest/mark/__init__.py#L45
Marks = Union[pytest.MarkDecorator, Collection[Union[pytest.MarkDecorator, pytest.Mark]]]


class DataCase(Protocol):
    marks: Marks

    @property
    def id(self) -> str:
        ...


def datacases(*cases: DataCase, _name: str = "case") -> pytest.MarkDecorator:
    return pytest.mark.parametrize(
        argnames=_name,
        argvalues=[pytest.param(case, id=case.id, marks=case.marks) for case in cases],
    )


def as_tuples(ranges: List[InclusiveRange[int]]) -> List[Tuple[int, int]]:
    return [r.as_tuple() for r in ranges]


def expand(ranges: List[InclusiveRange[int]]) -> List[int]:
    return [value for r in ranges for value in r]


def assert_coalesced(ranges: List[InclusiveRange[int]]) -> None:
    for r in ranges:
        assert r.start <= r.end
    for lower, upper in zip(ranges, ranges[1:]):
        # sorted, disjoint and at least one missing value in between
        assert lower.end + 1 < upper.start
