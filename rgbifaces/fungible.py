"""Fungible asset amounts and their decimal precision."""

from __future__ import annotations

import enum
import operator
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

LIB_NAME_RGB_CONTRACT = "RGBContract"
LIB_NAME_RGB21 = "RGB21"

_U64_MAX = (1 << 64) - 1


def _u64(value: object) -> int:
    """Return ``value`` as an int, checking that it fits into 64 unsigned bits."""
    if isinstance(value, bool):
        raise TypeError("expected an integer, got bool")
    try:
        number = operator.index(value)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(value).__name__}") from None
    if not 0 <= number <= _U64_MAX:
        raise ValueError(f"value {number} does not fit into an unsigned 64-bit integer")
    return number


class Precision(enum.IntEnum):
    """Number of decimal digits in the fractional part of an asset amount."""

    INDIVISIBLE = 0
    DECI = 1
    CENTI = 2
    MILLI = 3
    DECI_MILLI = 4
    CENTI_MILLI = 5
    MICRO = 6
    DECI_MICRO = 7
    CENTI_MICRO = 8
    NANO = 9
    DECI_NANO = 10
    CENTI_NANO = 11
    PICO = 12
    DECI_PICO = 13
    CENTI_PICO = 14
    FEMTO = 15
    DECI_FEMTO = 16
    CENTI_FEMTO = 17
    ATTO = 18

    @property
    def strict_name(self) -> str:
        """The camel-case name used for this variant in strict values."""
        first, *rest = self.name.lower().split("_")
        return first + "".join(part.capitalize() for part in rest)

    @classmethod
    def from_strict_val(cls, value: Union[int, str]) -> Precision:
        """Build a precision from its numeric tag or its camel-case name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.strict_name == value:
                    return member
            raise ValueError(f"unknown precision variant {value!r}")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected a precision tag or name, got {type(value).__name__}")
        return cls(value)

    def decimals(self) -> int:
        return int(self)

    def multiplier(self) -> int:
        return 10 ** int(self)

    def unchecked_convert(self, amount: int) -> Amount:
        """Scale an integer amount; raises OverflowError if the result exceeds 64 bits."""
        product = _u64(amount) * self.multiplier()
        if product > _U64_MAX:
            raise OverflowError(f"amount {amount} with precision {self.name} overflows")
        return Amount(product)

    def checked_convert(self, amount: int) -> Optional[Amount]:
        """Scale an integer amount, returning None on overflow."""
        product = _u64(amount) * self.multiplier()
        return Amount(product) if product <= _U64_MAX else None

    def saturating_convert(self, amount: int) -> Amount:
        """Scale an integer amount, clamping to the largest representable value."""
        return Amount(min(_u64(amount) * self.multiplier(), _U64_MAX))


DEFAULT_PRECISION = Precision.CENTI_MICRO


def _precision(value: Union[Precision, int]) -> Precision:
    return value if isinstance(value, Precision) else Precision(value)


def _operand(other: object) -> Optional[int]:
    if isinstance(other, Amount):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return _u64(other)
    return None


def _required_operand(other: object) -> int:
    number = _operand(other)
    if number is None:
        raise TypeError(f"expected an Amount or an integer, got {type(other).__name__}")
    return number


@dataclass(frozen=True, order=True)
class Amount:
    """An asset amount in its smallest indivisible units (unsigned 64-bit)."""

    value: int = 0

    ZERO: ClassVar[Amount]

    def __post_init__(self) -> None:
        _u64(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_strict_val(cls, value: int) -> Amount:
        return cls(_u64(value))

    @classmethod
    def with_precision(cls, amount: int, precision: Union[Precision, int]) -> Amount:
        return _precision(precision).unchecked_convert(amount)

    @classmethod
    def with_precision_checked(cls, amount: int, precision: Union[Precision, int]) -> Optional[Amount]:
        return _precision(precision).checked_convert(amount)

    def split(self, precision: Union[Precision, int]) -> tuple[int, int]:
        """Return the integer and fractional parts for the given precision."""
        return self.floor(precision), self.rem(precision)

    def round(self, precision: Union[Precision, int]) -> int:
        precision = _precision(precision)
        if self.value == 0:
            return 0
        mul = precision.multiplier()
        inc = 2 * self.rem(precision) // mul
        return self.value // mul + inc

    def ceil(self, precision: Union[Precision, int]) -> int:
        precision = _precision(precision)
        if self.value == 0:
            return 0
        inc = 1 if self.rem(precision) > 0 else 0
        return self.value // precision.multiplier() + inc

    def floor(self, precision: Union[Precision, int]) -> int:
        if self.value == 0:
            return 0
        return self.value // _precision(precision).multiplier()

    def rem(self, precision: Union[Precision, int]) -> int:
        return self.value % _precision(precision).multiplier()

    def saturating_add(self, other: Union[Amount, int]) -> Amount:
        return Amount(min(self.value + _required_operand(other), _U64_MAX))

    def saturating_sub(self, other: Union[Amount, int]) -> Amount:
        return Amount(max(self.value - _required_operand(other), 0))

    def checked_add(self, other: Union[Amount, int]) -> Optional[Amount]:
        total = self.value + _required_operand(other)
        return Amount(total) if total <= _U64_MAX else None

    def checked_sub(self, other: Union[Amount, int]) -> Optional[Amount]:
        diff = self.value - _required_operand(other)
        return Amount(diff) if diff >= 0 else None

    @classmethod
    def sum(cls, values: Iterable[Union[Amount, int]]) -> Amount:
        """Saturating sum of amounts or plain integers."""
        total = cls.ZERO
        for value in values:
            total = total.saturating_add(value)
        return total

    def _binary(self, other: object, op, symbol: str):
        number = _operand(other)
        if number is None:
            return NotImplemented
        result = op(self.value, number)
        if not 0 <= result <= _U64_MAX:
            raise OverflowError(f"{self.value} {symbol} {number} overflows an unsigned 64-bit amount")
        return Amount(result)

    def __add__(self, other: object):
        return self._binary(other, operator.add, "+")

    def __sub__(self, other: object):
        return self._binary(other, operator.sub, "-")

    def __mul__(self, other: object):
        return self._binary(other, operator.mul, "*")

    def __floordiv__(self, other: object):
        return self._binary(other, operator.floordiv, "//")

    def __mod__(self, other: object):
        return self._binary(other, operator.mod, "%")


Amount.ZERO = Amount(0)