# rgbifaces

Value types used by the standard RGB smart contract interfaces. The package
depends on nothing beyond the standard library.

## Modules

- `rgbifaces.fungible`
  - `Amount` is a frozen dataclass holding an unsigned 64-bit amount in
    indivisible units. It has checked methods (`checked_add` and
    `checked_sub`, which return `None` on overflow or underflow) and
    saturating methods (`saturating_add` and `saturating_sub`). It also has
    `floor`, `ceil`, `round`, `rem` and `split` for a given precision. The
    operators `+ - * // %` raise `OverflowError` when the result leaves the
    64-bit range. `Amount.sum` adds amounts or plain integers and saturates
    at the maximum.
  - `Precision` is an `IntEnum` with members from `INDIVISIBLE` (0) to
    `ATTO` (18) decimal places. `DEFAULT_PRECISION` is
    `Precision.CENTI_MICRO`, eight places. `multiplier()` returns
    `10 ** decimals()`. `unchecked_convert` raises `OverflowError` on
    overflow, `checked_convert` returns `None` and `saturating_convert`
    clamps.
  - The library names `LIB_NAME_RGB_CONTRACT` and `LIB_NAME_RGB21`.
- `rgbifaces.names`: the restricted strings below, which are `str`
  subclasses. Invalid input raises `InvalidRString`, a `ValueError`.
  - `Ticker` has 2 to 8 ASCII letters or digits and starts with a letter. It
    compares and hashes without regard to case.
  - `AssetName` has 1 to 40 printable ASCII characters.
  - `Details` has 1 to 255 printable ASCII characters.
- `rgbifaces.por`
  - `Outpoint` is a 32-byte txid with a 32-bit output index. Its `str()`
    shows the txid in reversed hex, then `:vout`.
  - `Layer1Ptr` points at a UTXO.
  - `ProofOfReserves` is an outpoint with a proof blob of at most 65535
    bytes.
- `rgbifaces.nft`: the RGB21 types.
  - `MediaType`, `MediaRegName` and `MimeChar`.
  - `TokenNo` (32-bit) and `TokenFractions` (64-bit).
  - `EmbeddedMedia`, `Attachment` (with a 32-byte digest), `Nft`,
    `OwnedNft` and `NftSpec`.
  - Parse failures raise `ParseMediaTypeError` or `NftParseError`. Both are
    `ValueError` subclasses with a `kind` attribute.

## Installation

```
pip install rgbifaces
```

## Usage

```python
from rgbifaces.fungible import Amount, Precision

amount = Amount.with_precision(12, Precision.CENTI)  # Amount(value=1200)
amount.split(Precision.CENTI)                        # (12, 0)
Amount(5).checked_sub(Amount(7))                     # None: would underflow
Amount(2**64 - 1).saturating_add(1)                  # stays at 2**64 - 1
Amount.sum([1, 2, 3])                                # Amount(value=6)
Precision.from_strict_val("centiMicro")              # Precision.CENTI_MICRO

from rgbifaces.names import Ticker

Ticker("usdt") == "USDT"                             # True

from rgbifaces.nft import MediaType, OwnedNft

str(MediaType.parse("image/png"))                    # "image/png"
str(MediaType.with_static("text/*"))                 # "text/*"
OwnedNft.parse("10@2")                               # 10 fractions of token 2
```

The `from_strict_val` constructors build values from decoded strict-type
data. This data is given as plain Python values: integers, strings, bytes,
`None` for absent options and dictionaries for structures. For example,
`ProofOfReserves.from_strict_val` takes
`{"utxo": {"txid": bytes, "vout": int}, "proof": bytes}`.

## What it does not do

The package holds the value types, their validation and their arithmetic. It
does not encode or decode values in the strict binary format. It does not
build, identify or export type libraries or type systems. It has no
command-line tool.

## Tests

```
pip install -e ".[test]"
pytest
```