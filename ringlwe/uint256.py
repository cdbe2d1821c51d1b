"""Unsigned 256-bit integers with wrap-around arithmetic."""

from __future__ import annotations

import operator
from typing import Union

_BITS = 256
_HALF_BITS = 128
_MASK = (1 << _BITS) - 1
_HALF_MASK = (1 << _HALF_BITS) - 1

IntLike = Union["Uint256", int]


def _coerce(value: object) -> int | None:
    """Return the 256-bit residue of an integer-like value, or None."""
    if isinstance(value, Uint256):
        return value._value
    if isinstance(value, int):
        return value & _MASK
    return None


class Uint256:
    """An immutable unsigned 256-bit integer.

    All arithmetic is performed modulo 2**256, so negative integers passed to
    the constructor or mixed into arithmetic wrap around the way two's
    complement values do.
    """

    __slots__ = ("_value",)

    def __init__(self, value: IntLike = 0) -> None:
        self._value = operator.index(value) & _MASK

    @classmethod
    def from_parts(cls, high: int, low: int) -> Uint256:
        """Build a value from its high and low 128-bit halves."""
        high = operator.index(high) & _HALF_MASK
        low = operator.index(low) & _HALF_MASK
        return cls((high << _HALF_BITS) | low)

    def high(self) -> int:
        """The most significant 128 bits."""
        return self._value >> _HALF_BITS

    def low(self) -> int:
        """The least significant 128 bits."""
        return self._value & _HALF_MASK

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __float__(self) -> float:
        return float(self.low()) + float(self.high()) * 2.0**_HALF_BITS

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value <= rhs

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value > rhs

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value >= rhs

    def __add__(self, other: object) -> Uint256:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Uint256(self._value + rhs)

    def __radd__(self, other: object) -> Uint256:
        return self.__add__(other)

    def __sub__(self, other: object) -> Uint256:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Uint256(self._value - rhs)

    def __rsub__(self, other: object) -> Uint256:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return Uint256(lhs - self._value)

    def __mul__(self, other: object) -> Uint256:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Uint256(self._value * rhs)

    def __rmul__(self, other: object) -> Uint256:
        return self.__mul__(other)

    def _divmod(self, divisor: int) -> tuple[Uint256, Uint256]:
        if divisor == 0:
            raise ZeroDivisionError(
                f"Division or mod by zero: dividend.hi={self.high()}, lo={self.low()}"
            )
        quotient, remainder = divmod(self._value, divisor)
        return Uint256(quotient), Uint256(remainder)

    def __floordiv__(self, other: object) -> Uint256:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._divmod(rhs)[0]

    def __mod__(self, other: object) -> Uint256:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._divmod(rhs)[1]

    def __divmod__(self, other: object) -> tuple[Uint256, Uint256]:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._divmod(rhs)

    def __lshift__(self, amount: int) -> Uint256:
        amount = operator.index(amount)
        if amount < 0:
            raise ValueError("negative shift count")
        if amount >= _BITS:
            return Uint256(0)
        return Uint256(self._value << amount)

    def __rshift__(self, amount: int) -> Uint256:
        amount = operator.index(amount)
        if amount < 0:
            raise ValueError("negative shift count")
        if amount >= _BITS:
            return Uint256(0)
        return Uint256(self._value >> amount)

    def __and__(self, other: object) -> Uint256:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Uint256(self._value & rhs)

    def __or__(self, other: object) -> Uint256:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Uint256(self._value | rhs)

    def __xor__(self, other: object) -> Uint256:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Uint256(self._value ^ rhs)

    def __invert__(self) -> Uint256:
        return Uint256(~self._value)

    def __neg__(self) -> Uint256:
        return Uint256(-self._value)

    def __repr__(self) -> str:
        return f"Uint256({self._value})"

    def __str__(self) -> str:
        return str(self._value)


def uint256_max() -> Uint256:
    """The largest value a Uint256 can hold, 2**256 - 1."""
    return Uint256(_MASK)