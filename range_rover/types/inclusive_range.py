from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Tuple, Type, TypeVar

from typing_extensions import final

from range_rover.util.saturating import is_adjacent

T = TypeVar("T", bound=int)


@final
@dataclass(frozen=True)
class InclusiveRange(Generic[T]):
    """
    The integers from ``start`` to ``end``, both included.

    Ranges produced by this package always have ``start <= end``. Caller supplied bounds may be inverted,
    such a range is empty.
    """

    start: T
    end: T

    @classmethod
    def from_pair(cls, pair: Tuple[T, T]) -> InclusiveRange[T]:
        start, end = pair
        return cls(start=start, end=end)

    def as_tuple(self) -> Tuple[T, T]:
        return self.start, self.end

    @property
    def is_empty(self) -> bool:
        return self.start > self.end

    def to_range(self) -> range:
        if self.is_empty:
            return range(0)
        return range(self.start, self.end + 1)

    def is_adjacent_to(self, other: InclusiveRange[T], domain: Type[int] = int) -> bool:
        if self.is_empty or other.is_empty:
            return False
        if self.end < other.start:
            return is_adjacent(self.end, other.start, domain)
        if other.end < self.start:
            return is_adjacent(other.end, self.start, domain)
        return False

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return self.start <= value <= self.end

    def __len__(self) -> int:
        if self.is_empty:
            return 0
        return self.end - self.start + 1

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_range())
