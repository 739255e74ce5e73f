from __future__ import annotations

from typing import SupportsInt, Type, TypeVar, Union

from typing_extensions import Protocol, SupportsIndex

_T_SizedInt = TypeVar("_T_SizedInt", bound="SizedInt")


# https://github.com/python/typeshed/blob/c2182fdd3e572a1220c70ad9c28fd908b70fb19b/stdlib/_typeshed/__init__.pyi#L68-L69
class SupportsTrunc(Protocol):
    def __trunc__(self) -> int:
        ...


def parse_metadata_from_name(cls: Type[_T_SizedInt]) -> Type[_T_SizedInt]:
    name_signedness, _, name_bit_size = cls.__name__.partition("int")
    cls.SIGNED = False if name_signedness == "u" else True
    try:
        cls.BITS = int(name_bit_size)
    except ValueError as e:
        raise ValueError(f"expected integer suffix but got: {name_bit_size!r}") from e

    if cls.BITS <= 0:
        raise ValueError(f"bit size must greater than zero but got: {cls.BITS}")

    expected_name = f"{'' if cls.SIGNED else 'u'}int{cls.BITS}"
    if cls.__name__ != expected_name:
        raise ValueError(f"expected class name is {expected_name} but got: {cls.__name__}")

    if cls.SIGNED:
        minimum = -(2 ** (cls.BITS - 1))
        maximum = 2 ** (cls.BITS - 1) - 1
    else:
        minimum = 0
        maximum = 2**cls.BITS - 1

    # the bounds are set as plain ints first so the instances below pass the range check
    cls.MINIMUM = minimum
    cls.MAXIMUM = maximum
    cls.MINIMUM = cls(minimum)
    cls.MAXIMUM = cls(maximum)

    return cls


class SizedInt(int):
    """
    An int restricted to the inclusive range [MINIMUM, MAXIMUM] of a fixed width integer type.

    Subclasses are named ``intN`` or ``uintN`` and decorated with ``parse_metadata_from_name`` which
    derives the signedness, the bit width and the bounds from the name.
    """

    BITS = 0
    SIGNED = False
    MINIMUM = 0
    MAXIMUM = -1

    # This is just a partial exposure of the underlying int constructor.  Liskov...
    # https://github.com/python/typeshed/blob/5d07ebc864577c04366fcc46b84479dbec033921/stdlib/builtins.pyi#L181-L185
    def __init__(self, value: Union[str, bytes, SupportsInt, SupportsIndex, SupportsTrunc]) -> None:
        # .__new__() has already converted the parameter, only the bounds are left to verify
        super().__init__()
        if not (self.MINIMUM <= self <= self.MAXIMUM):
            raise ValueError(f"Value {int(self)} does not fit into {type(self).__name__}")

    def successor(self: _T_SizedInt) -> _T_SizedInt:
        if self >= self.MAXIMUM:
            return type(self)(self.MAXIMUM)
        return type(self)(int(self) + 1)

    def predecessor(self: _T_SizedInt) -> _T_SizedInt:
        if self <= self.MINIMUM:
            return type(self)(self.MINIMUM)
        return type(self)(int(self) - 1)
