"""Non-fungible token types: media types, token numbers, fractions and NFT specs."""

from __future__ import annotations

import enum
import functools
import re
import string
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional

from rgbifaces.names import AssetName, InvalidRString, _RestrictedString
from rgbifaces.por import ProofOfReserves

_SMALL_BLOB_MAX = 0xFFFF
_DIGEST_LEN = 32
_UINT_RE = re.compile(r"\+?[0-9]+")


class MimeChar(enum.IntEnum):
    """Characters allowed after the first one in a media registration name."""

    EXCL = ord("!")
    HASH = ord("#")
    DOLLAR = ord("$")
    AMP = ord("&")
    PLUS = ord("+")
    DASH = ord("-")
    DOT = ord(".")
    ZERO = ord("0")
    ONE = ord("1")
    TWO = ord("2")
    THREE = ord("3")
    FOUR = ord("4")
    FIVE = ord("5")
    SIX = ord("6")
    SEVEN = ord("7")
    EIGHT = ord("8")
    NINE = ord("9")
    CARET = ord("^")
    LODASH = ord("_")
    a = ord("a")
    b = ord("b")
    c = ord("c")
    d = ord("d")
    e = ord("e")
    f = ord("f")
    g = ord("g")
    h = ord("h")
    i = ord("i")
    j = ord("j")
    k = ord("k")
    l = ord("l")  # noqa: E741
    m = ord("m")
    n = ord("n")
    o = ord("o")
    p = ord("p")
    q = ord("q")
    r = ord("r")
    s = ord("s")
    t = ord("t")
    u = ord("u")
    v = ord("v")
    w = ord("w")
    x = ord("x")
    y = ord("y")
    z = ord("z")

    def __str__(self) -> str:
        return chr(self.value)


class MediaRegName(_RestrictedString):
    """A media (MIME) type or subtype name: 1 to 64 characters, starting lowercase."""

    FIRST = frozenset(string.ascii_lowercase)
    REST = frozenset(chr(member.value) for member in MimeChar)
    MIN_LEN = 1
    MAX_LEN = 64

    @classmethod
    def from_strict_val(cls, value: str) -> MediaRegName:
        return cls(value)


class ParseMediaTypeError(ValueError):
    """A media type string could not be parsed."""

    class Kind(enum.Enum):
        INVALID_STRUCTURE = "invalid_structure"
        TYPE_NAME = "type_name"
        SUBTYPE_NAME = "subtype_name"

    def __init__(self, kind: ParseMediaTypeError.Kind, cause: Optional[InvalidRString] = None) -> None:
        self.kind = kind
        self.cause = cause
        if kind is ParseMediaTypeError.Kind.INVALID_STRUCTURE:
            message = "media type (MIME) must consist of two parts separated by a slash."
        elif kind is ParseMediaTypeError.Kind.TYPE_NAME:
            message = f"invalid media (MIME) type component; {cause}"
        else:
            message = f"invalid media (MIME) subtype component; {cause}"
        super().__init__(message)


def _optional_name(value: Optional[str]) -> Optional[MediaRegName]:
    if value is None or isinstance(value, MediaRegName):
        return value
    return MediaRegName(value)


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class MediaType:
    """A media (MIME) type; a missing subtype stands for ``*``."""

    ty: MediaRegName
    subtype: Optional[MediaRegName] = None
    charset: Optional[MediaRegName] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "ty", MediaRegName(self.ty) if not isinstance(self.ty, MediaRegName) else self.ty)
        object.__setattr__(self, "subtype", _optional_name(self.subtype))
        object.__setattr__(self, "charset", _optional_name(self.charset))

    def _sort_key(self) -> tuple:
        return (
            str(self.ty),
            self.subtype is not None,
            str(self.subtype or ""),
            self.charset is not None,
            str(self.charset or ""),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MediaType):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.ty}/{self.subtype if self.subtype is not None else '*'}"

    @classmethod
    def with_static(cls, s: str) -> MediaType:
        """Build from a known-good ``type/subtype`` string; raises ValueError if malformed."""
        ty, sep, subty = s.partition("/")
        if not sep:
            raise ValueError("invalid static media type string")
        return cls(MediaRegName(ty), None if subty == "*" else MediaRegName(subty))

    @classmethod
    def parse(cls, s: str) -> MediaType:
        ty, sep, subty = s.partition("/")
        if not sep:
            raise ParseMediaTypeError(ParseMediaTypeError.Kind.INVALID_STRUCTURE)
        try:
            type_name = MediaRegName(ty)
        except InvalidRString as err:
            raise ParseMediaTypeError(ParseMediaTypeError.Kind.TYPE_NAME, err) from err
        subtype_name = None
        if subty != "*":
            try:
                subtype_name = MediaRegName(subty)
            except InvalidRString as err:
                raise ParseMediaTypeError(ParseMediaTypeError.Kind.SUBTYPE_NAME, err) from err
        return cls(type_name, subtype_name, None)

    @classmethod
    def from_strict_val(cls, value: Mapping[str, Any]) -> MediaType:
        """Build from ``{"type": str, "subtype": str | None, "charset": str | None}``."""
        return cls(
            MediaRegName.from_strict_val(value["type"]),
            _optional_name(value.get("subtype")),
            _optional_name(value.get("charset")),
        )


@dataclass(frozen=True, order=True)
class _UInt:
    """An unsigned integer of fixed width with checked arithmetic."""

    value: int = 0

    _BITS: ClassVar[int] = 64

    @classmethod
    def _max(cls) -> int:
        return (1 << cls._BITS) - 1

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} needs an integer, got {type(self.value).__name__}")
        if not 0 <= self.value <= self._max():
            raise ValueError(f"{self.value} does not fit into an unsigned {self._BITS}-bit integer")

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def _parse_decimal(cls, s: str) -> int:
        """Parse a decimal number, as an optional ``+`` followed by digits."""
        if not _UINT_RE.fullmatch(s):
            raise ValueError(f"invalid {cls.__name__} {s!r}")
        number = int(s)
        if number > cls._max():
            raise ValueError(f"{cls.__name__} {s!r} is too large")
        return number

    def _operand(self, other: object) -> Optional[int]:
        if isinstance(other, type(self)):
            return other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def _required(self, other: object) -> int:
        number = self._operand(other)
        if number is None or not 0 <= number <= self._max():
            raise TypeError(f"expected a {type(self).__name__} or an integer in range, got {other!r}")
        return number

    def _binary(self, other: object, result_of):
        number = self._operand(other)
        if number is None:
            return NotImplemented
        result = result_of(self.value, number)
        if not 0 <= result <= self._max():
            raise OverflowError(f"{type(self).__name__} arithmetic overflow")
        return type(self)(result)

    def __add__(self, other: object):
        return self._binary(other, lambda a, b: a + b)

    def __sub__(self, other: object):
        return self._binary(other, lambda a, b: a - b)

    def __mul__(self, other: object):
        return self._binary(other, lambda a, b: a * b)

    def __floordiv__(self, other: object):
        return self._binary(other, lambda a, b: a // b)

    def __mod__(self, other: object):
        return self._binary(other, lambda a, b: a % b)


class TokenNo(_UInt):
    """Index of a token within an RGB21 contract (unsigned 32-bit)."""

    _BITS = 32

    @classmethod
    def parse(cls, s: str) -> TokenNo:
        """Parse a decimal token number, as an optional ``+`` followed by digits."""
        return cls(cls._parse_decimal(s))


class TokenFractions(_UInt):
    """Number of fractions of a token (unsigned 64-bit)."""

    _BITS = 64
    ZERO: ClassVar[TokenFractions]

    @classmethod
    def parse(cls, s: str) -> TokenFractions:
        """Parse a decimal number of fractions, as an optional ``+`` followed by digits."""
        return cls(cls._parse_decimal(s))

    @classmethod
    def from_strict_val(cls, value: int) -> TokenFractions:
        return cls(value)

    def saturating_add(self, other) -> TokenFractions:
        return TokenFractions(min(self.value + self._required(other), self._max()))

    def saturating_sub(self, other) -> TokenFractions:
        return TokenFractions(max(self.value - self._required(other), 0))

    def checked_add(self, other) -> Optional[TokenFractions]:
        total = self.value + self._required(other)
        return TokenFractions(total) if total <= self._max() else None

    def checked_sub(self, other) -> Optional[TokenFractions]:
        diff = self.value - self._required(other)
        return TokenFractions(diff) if diff >= 0 else None


TokenFractions.ZERO = TokenFractions(0)


def _as_bytes(value: object, what: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes, got {type(value).__name__}")
    return bytes(value)


@dataclass(frozen=True)
class EmbeddedMedia:
    """Media embedded into a contract: a media type and up to 65535 bytes of data."""

    mime: MediaType
    data: bytes = b""

    def __post_init__(self) -> None:
        data = _as_bytes(self.data, "data")
        if len(data) > _SMALL_BLOB_MAX:
            raise ValueError(f"embedded data must be at most {_SMALL_BLOB_MAX} bytes long, got {len(data)}")
        object.__setattr__(self, "data", data)

    @classmethod
    def from_strict_val(cls, value: Mapping[str, Any]) -> EmbeddedMedia:
        return cls(MediaType.from_strict_val(value["mime"]), value["data"])


@dataclass(frozen=True, order=True)
class Attachment:
    """External media referenced by its media type and 32-byte digest."""

    mime: MediaType
    digest: bytes

    def __post_init__(self) -> None:
        digest = _as_bytes(self.digest, "digest")
        if len(digest) != _DIGEST_LEN:
            raise ValueError(f"invalid digest: must be {_DIGEST_LEN} bytes long, got {len(digest)}")
        object.__setattr__(self, "digest", digest)

    @classmethod
    def from_strict_val(cls, value: Mapping[str, Any]) -> Attachment:
        return cls(MediaType.from_strict_val(value["mime"]), value["digest"])


def _token_no(value: object) -> TokenNo:
    return value if isinstance(value, TokenNo) else TokenNo(value)


def _fractions(value: object) -> TokenFractions:
    return value if isinstance(value, TokenFractions) else TokenFractions(value)


@dataclass(frozen=True)
class Nft:
    """A token number together with a number of its fractions."""

    token_no: TokenNo = field(default=TokenNo(0))
    fractions: TokenFractions = field(default=TokenFractions(0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "token_no", _token_no(self.token_no))
        object.__setattr__(self, "fractions", _fractions(self.fractions))


class NftParseError(ValueError):
    """An owned NFT allocation string could not be parsed."""

    class Kind(enum.Enum):
        INVALID_INDEX = "invalid_index"
        INVALID_FRACTION = "invalid_fraction"
        WRONG_FORMAT = "wrong_format"

    def __init__(self, kind: NftParseError.Kind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        if kind is NftParseError.Kind.INVALID_INDEX:
            message = f"invalid token index {detail}."
        elif kind is NftParseError.Kind.INVALID_FRACTION:
            message = f"invalid fraction {detail}."
        else:
            message = "allocation must have format <fraction>@<token_index>."
        super().__init__(message)


@dataclass(frozen=True)
class OwnedNft:
    """An owned allocation of fractions of a token."""

    token_no: TokenNo = field(default=TokenNo(0))
    fractions: TokenFractions = field(default=TokenFractions(0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "token_no", _token_no(self.token_no))
        object.__setattr__(self, "fractions", _fractions(self.fractions))

    @classmethod
    def parse(cls, s: str) -> OwnedNft:
        """Parse ``<fraction>@<token_index>``."""
        fraction, sep, token_index = s.partition("@")
        if not sep:
            raise NftParseError(NftParseError.Kind.WRONG_FORMAT)
        try:
            token_no = TokenNo.parse(token_index)
        except ValueError:
            raise NftParseError(NftParseError.Kind.INVALID_INDEX, token_index) from None
        try:
            fractions = TokenFractions.parse(fraction)
        except ValueError:
            raise NftParseError(NftParseError.Kind.INVALID_FRACTION, fraction.lower()) from None
        return cls(token_no, fractions)


def _optional(value: Mapping[str, Any], key: str):
    return value.get(key)


@dataclass(frozen=True)
class NftSpec:
    """Specification of an NFT: name, embedded media, attachment and reserves."""

    name: Optional[AssetName]
    embedded: EmbeddedMedia
    external: Optional[Attachment] = None
    reserves: Optional[ProofOfReserves] = None

    def __post_init__(self) -> None:
        if self.name is not None and not isinstance(self.name, AssetName):
            object.__setattr__(self, "name", AssetName(self.name))

    @classmethod
    def from_strict_val(cls, value: Mapping[str, Any]) -> NftSpec:
        name = _optional(value, "name")
        external = _optional(value, "external")
        reserves = _optional(value, "reserves")
        return cls(
            name=None if name is None else AssetName(name),
            embedded=EmbeddedMedia.from_strict_val(value["embedded"]),
            external=None if external is None else Attachment.from_strict_val(external),
            reserves=None if reserves is None else ProofOfReserves.from_strict_val(reserves),
        )