from __future__ import annotations

from typing import Optional, Tuple, Type, TypeVar, cast

from range_rover.util.sized_int import SizedInt

T = TypeVar("T", bound=int)


def domain_bounds(domain: Type[int]) -> Tuple[Optional[int], Optional[int]]:
    if issubclass(domain, SizedInt):
        return domain.MINIMUM, domain.MAXIMUM
    return None, None


def infer_domain(value: int) -> Type[int]:
    if isinstance(value, SizedInt):
        return type(value)
    # bool and other int subclasses widen to int, bool(n) would collapse every value to True
    return int


def coerce(value: int, domain: Type[T]) -> T:
    if type(value) is domain:
        return cast(T, value)
    return domain(value)


def saturating_increment(value: T, domain: Type[T]) -> T:
    if issubclass(domain, SizedInt):
        return coerce(value, domain).successor()  # type: ignore[no-any-return]
    return domain(value + 1)


def saturating_decrement(value: T, domain: Type[T]) -> T:
    if issubclass(domain, SizedInt):
        return coerce(value, domain).predecessor()  # type: ignore[no-any-return]
    return domain(value - 1)


def is_adjacent(lower_end: int, upper_start: int, domain: Type[int]) -> bool:
    """
    True when ``upper_start`` directly follows ``lower_end``, so the two ranges form one contiguous run.
    At the domain maximum the successor saturates instead of wrapping to the minimum.
    """
    return saturating_increment(lower_end, domain) == upper_start
