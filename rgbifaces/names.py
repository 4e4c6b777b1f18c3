"""Restricted-charset names used by RGB contracts: tickers, asset names, details."""

from __future__ import annotations

import string
from typing import ClassVar

_ALPHA = frozenset(string.ascii_letters)
_ALPHA_NUM = frozenset(string.ascii_letters + string.digits)
_ASCII_PRINTABLE = frozenset(chr(code) for code in range(0x20, 0x7F))


class InvalidRString(ValueError):
    """A string violates the length or character restrictions of its type."""


class _RestrictedString(str):
    """A string whose first character, other characters and length are restricted."""

    FIRST: ClassVar[frozenset]
    REST: ClassVar[frozenset]
    MIN_LEN: ClassVar[int]
    MAX_LEN: ClassVar[int]

    def __new__(cls, value: str):
        if not isinstance(value, str):
            raise TypeError(f"{cls.__name__} must be built from a string, got {type(value).__name__}")
        name = cls.__name__
        if not value:
            raise InvalidRString(f"{name} must not be empty")
        if len(value) < cls.MIN_LEN:
            raise InvalidRString(f"{name} must be at least {cls.MIN_LEN} characters long")
        if len(value) > cls.MAX_LEN:
            raise InvalidRString(f"{name} must be at most {cls.MAX_LEN} characters long")
        if value[0] not in cls.FIRST:
            raise InvalidRString(f"{name} {value!r} starts with a disallowed character {value[0]!r}")
        for position, char in enumerate(value[1:], start=1):
            if char not in cls.REST:
                raise InvalidRString(
                    f"{name} {value!r} holds a disallowed character {char!r} at position {position}"
                )
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


class Ticker(_RestrictedString):
    """Asset ticker: 2 to 8 ASCII letters or digits, starting with a letter.

    Tickers compare and hash case-insensitively.
    """

    FIRST = _ALPHA
    REST = _ALPHA_NUM
    MIN_LEN = 2
    MAX_LEN = 8

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.upper() == other.upper()
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return hash(self.upper())

    @classmethod
    def from_strict_val(cls, value: str) -> Ticker:
        return cls(value)


class AssetName(_RestrictedString):
    """Asset name: 1 to 40 printable ASCII characters."""

    FIRST = _ASCII_PRINTABLE
    REST = _ASCII_PRINTABLE
    MIN_LEN = 1
    MAX_LEN = 40

    @classmethod
    def from_strict_val(cls, value: str) -> AssetName:
        return cls(value)


class Details(_RestrictedString):
    """Free-form asset details: 1 to 255 printable ASCII characters."""

    FIRST = _ASCII_PRINTABLE
    REST = _ASCII_PRINTABLE
    MIN_LEN = 1
    MAX_LEN = 0xFF