from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, Type, TypeVar, Union, cast

from range_rover.types.inclusive_range import InclusiveRange
from range_rover.util.errors import DomainError, InvalidBoundError
from range_rover.util.saturating import (
    coerce,
    domain_bounds,
    infer_domain,
    is_adjacent,
    saturating_decrement,
    saturating_increment,
)

log = logging.getLogger(__name__)

T = TypeVar("T", bound=int)

BoundLike = Union[InclusiveRange[T], Tuple[T, T]]


class RangeNode(Generic[T]):
    """
    One maximal known range. ``less`` holds ranges strictly below ``start`` and ``more`` holds ranges strictly
    above ``end``, neither of them adjacent to this node's range.
    """

    __slots__ = ("start", "end", "less", "more")

    def __init__(self, value: T) -> None:
        self.start: T = value
        self.end: T = value
        self.less: Optional[RangeNode[T]] = None
        self.more: Optional[RangeNode[T]] = None

    @property
    def range(self) -> InclusiveRange[T]:
        return InclusiveRange(start=self.start, end=self.end)

    def __repr__(self) -> str:
        return f"<RangeNode [{self.start}, {self.end}]>"


def to_domain(value: object, domain: Type[T]) -> T:
    if not isinstance(value, int):
        raise DomainError(value, domain)
    try:
        return coerce(value, domain)
    except ValueError as e:
        raise DomainError(value, domain) from e


def to_bound(bound: BoundLike[T], domain: Type[T]) -> InclusiveRange[T]:
    if isinstance(bound, InclusiveRange):
        start, end = bound.as_tuple()
    else:
        start, end = bound
    return InclusiveRange(start=to_domain(start, domain), end=to_domain(end, domain))


def compute_gaps(
    filled: List[InclusiveRange[T]],
    bound: BoundLike[T],
    domain: Type[T],
    *,
    reject_inverted: bool = False,
) -> List[InclusiveRange[T]]:
    """
    The sub-ranges of ``bound`` not covered by ``filled``, ascending.

    ``filled`` must be sorted, disjoint and coalesced, as returned by ``RangeTree.to_vec()``. An empty
    ``filled`` leaves the whole bound as a single gap. An inverted bound yields no gaps, or raises
    ``InvalidBoundError`` when ``reject_inverted`` is set.
    """
    clip = to_bound(bound, domain)
    if clip.is_empty:
        if reject_inverted:
            raise InvalidBoundError(clip.start, clip.end)
        log.debug(f"Inverted bound [{clip.start}, {clip.end}], no gaps to report")
        return []

    if len(filled) == 0:
        return [clip]

    candidates: List[Tuple[T, T]] = []
    first = filled[0]
    if first.start > clip.start:
        candidates.append((clip.start, saturating_decrement(first.start, domain)))
    for lower, upper in zip(filled, filled[1:]):
        candidates.append((saturating_increment(lower.end, domain), saturating_decrement(upper.start, domain)))
    last = filled[-1]
    if last.end < clip.end:
        candidates.append((saturating_increment(last.end, domain), clip.end))

    gaps: List[InclusiveRange[T]] = []
    for start, end in candidates:
        # filled may reach past the bound on either side
        start = max(start, clip.start)
        end = min(end, clip.end)
        if start <= end:
            gaps.append(InclusiveRange(start=start, end=end))
    return gaps


class RangeTree(Generic[T]):
    """
    Disjoint inclusive integer ranges kept in a binary search tree, merged as values arrive.

    The shape follows insertion order and is never rebalanced. Adjacent ranges are merged into their parent as
    soon as an insertion makes them touch. Ranges that end up adjacent across different subtrees are coalesced
    by ``to_vec()``.

    Values live in a ``domain``: plain ``int`` is unbounded, a ``SizedInt`` subclass such as ``uint32``
    saturates at its ``MINIMUM`` and ``MAXIMUM`` so a range may end at the maximum without wrapping.
    A domain inferred from the first value widens to ``int`` when a later value does not fit it. A domain
    passed explicitly is kept and such values raise ``DomainError``.
    """

    def __init__(self, value: int, domain: Optional[Type[T]] = None) -> None:
        self._fixed_domain = domain is not None
        if domain is None:
            domain = cast(Type[T], infer_domain(value))
        self._domain: Type[T] = domain
        self._root: RangeNode[T] = RangeNode(to_domain(value, domain))

    @classmethod
    def from_values(cls, values: Iterable[int], domain: Optional[Type[T]] = None) -> Optional[RangeTree[T]]:
        """
        Build a tree from the first value and insert the rest in arrival order.
        Returns None for empty input since a tree always holds at least one range.
        """
        iterator = iter(values)
        for first in iterator:
            break
        else:
            return None

        tree: RangeTree[T] = cls(first, domain)
        tree.extend(iterator)
        if log.isEnabledFor(logging.DEBUG):
            log.debug(f"Built {tree!r} with {tree.node_count()} nodes and depth {tree.depth()}")
        return tree

    @property
    def domain(self) -> Type[T]:
        return self._domain

    @property
    def bounds(self) -> Tuple[Optional[int], Optional[int]]:
        return domain_bounds(self._domain)

    def insert(self, value: int) -> None:
        item = self._to_domain(value)
        path: List[Tuple[RangeNode[T], bool]] = []
        node = self._root
        while True:
            if node.start <= item <= node.end:
                return
            if item < node.start:
                path.append((node, True))
                if node.less is None:
                    node.less = RangeNode(item)
                    break
                node = node.less
            else:
                path.append((node, False))
                if node.more is None:
                    node.more = RangeNode(item)
                    break
                node = node.more

        # every node on the path may now touch the child it was entered through
        for parent, went_less in reversed(path):
            if went_less:
                self._merge_less(parent)
            else:
                self._merge_more(parent)

    def _to_domain(self, value: int) -> T:
        try:
            return to_domain(value, self._domain)
        except DomainError:
            if self._fixed_domain or self._domain is int or not isinstance(value, int):
                raise
        self._widen()
        return to_domain(value, self._domain)

    def _widen(self) -> None:
        if log.isEnabledFor(logging.DEBUG):
            log.debug(f"{self!r} widened from {self._domain.__name__} to int")
        self._domain = cast(Type[T], int)
        for node in self._nodes():
            node.start = cast(T, int(node.start))
            node.end = cast(T, int(node.end))

    def _merge_less(self, node: RangeNode[T]) -> None:
        child = node.less
        if child is None or not is_adjacent(child.end, node.start, self._domain):
            return
        # nothing fits between child.end and node.start
        assert child.more is None
        node.start = child.start
        node.less = child.less

    def _merge_more(self, node: RangeNode[T]) -> None:
        child = node.more
        if child is None or not is_adjacent(node.end, child.start, self._domain):
            return
        assert child.less is None
        node.end = child.end
        node.more = child.more

    def extend(self, values: Iterable[int]) -> None:
        for value in values:
            self.insert(value)

    def to_vec(self) -> List[InclusiveRange[T]]:
        ranges: List[InclusiveRange[T]] = []
        stack: List[RangeNode[T]] = []
        node: Optional[RangeNode[T]] = self._root
        while len(stack) > 0 or node is not None:
            while node is not None:
                stack.append(node)
                node = node.less
            current = stack.pop()
            if len(ranges) > 0 and is_adjacent(ranges[-1].end, current.start, self._domain):
                ranges[-1] = InclusiveRange(start=ranges[-1].start, end=current.end)
            else:
                ranges.append(current.range)
            node = current.more
        return ranges

    def missed_in_range(self, bound: BoundLike[T], *, reject_inverted: bool = False) -> List[InclusiveRange[T]]:
        return compute_gaps(self.to_vec(), bound, self._domain, reject_inverted=reject_inverted)

    def value_count(self) -> int:
        return sum(r.end - r.start + 1 for r in self.to_vec())

    def node_count(self) -> int:
        return sum(1 for _ in self._nodes())

    def depth(self) -> int:
        deepest = 0
        stack: List[Tuple[RangeNode[T], int]] = [(self._root, 1)]
        while len(stack) > 0:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in (node.less, node.more):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest

    def _nodes(self) -> Iterator[RangeNode[T]]:
        stack: List[RangeNode[T]] = [self._root]
        while len(stack) > 0:
            node = stack.pop()
            yield node
            for child in (node.less, node.more):
                if child is not None:
                    stack.append(child)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        node: Optional[RangeNode[T]] = self._root
        while node is not None:
            if value < node.start:
                node = node.less
            elif value > node.end:
                node = node.more
            else:
                return True
        return False

    def __len__(self) -> int:
        return self.value_count()

    def __iter__(self) -> Iterator[InclusiveRange[T]]:
        return iter(self.to_vec())

    def __repr__(self) -> str:
        ranges = ", ".join(f"[{r.start}, {r.end}]" for r in self.to_vec())
        return f"<RangeTree {self._domain.__name__} {ranges}>"
