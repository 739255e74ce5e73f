from __future__ import annotations

from typing import Iterable, List, Optional, Type, TypeVar, cast

from range_rover.core.range_tree import BoundLike, RangeTree, compute_gaps
from range_rover.types.inclusive_range import InclusiveRange
from range_rover.util.saturating import infer_domain

T = TypeVar("T", bound=int)


def range_rover(values: Iterable[int], domain: Optional[Type[T]] = None) -> List[InclusiveRange[T]]:
    """
    Coalesce integers, in any order and with repeats, into sorted disjoint non-adjacent inclusive ranges.
    """
    tree = RangeTree.from_values(values, domain)
    if tree is None:
        return []
    return tree.to_vec()


def missed_in_range(
    values: Iterable[int],
    bound: BoundLike[T],
    domain: Optional[Type[T]] = None,
    *,
    reject_inverted: bool = False,
) -> List[InclusiveRange[T]]:
    """
    The sub-ranges of ``bound`` that hold none of ``values``, ascending.

    With no values at all the whole bound is one gap. See ``compute_gaps`` for inverted bounds.
    """
    tree = RangeTree.from_values(values, domain)
    if tree is not None:
        return tree.missed_in_range(bound, reject_inverted=reject_inverted)

    if domain is None:
        start = bound.start if isinstance(bound, InclusiveRange) else bound[0]
        domain = cast(Type[T], infer_domain(start))
    return compute_gaps([], bound, domain, reject_inverted=reject_inverted)
