"""Proof of reserves and layer-1 pointers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

_TXID_LEN = 32
_U32_MAX = (1 << 32) - 1
_SMALL_BLOB_MAX = 0xFFFF


def _as_bytes(value: object, what: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{what} must be bytes, got {type(value).__name__}")
    return bytes(value)


@dataclass(frozen=True, order=True)
class Outpoint:
    """A transaction output reference: a 32-byte txid and an output index."""

    txid: bytes
    vout: int

    def __post_init__(self) -> None:
        txid = _as_bytes(self.txid, "txid")
        if len(txid) != _TXID_LEN:
            raise ValueError(f"txid must be {_TXID_LEN} bytes long, got {len(txid)}")
        object.__setattr__(self, "txid", txid)
        if isinstance(self.vout, bool) or not isinstance(self.vout, int):
            raise TypeError(f"vout must be an integer, got {type(self.vout).__name__}")
        if not 0 <= self.vout <= _U32_MAX:
            raise ValueError(f"vout {self.vout} does not fit into an unsigned 32-bit integer")

    def __str__(self) -> str:
        return f"{self.txid[::-1].hex()}:{self.vout}"


@dataclass(frozen=True, order=True)
class Layer1Ptr:
    """A pointer into layer 1; the only supported kind is a UTXO."""

    utxo: Outpoint

    TAG: ClassVar[int] = 0x01


@dataclass(frozen=True, order=True)
class ProofOfReserves:
    """A UTXO holding reserves together with a proof blob of at most 65535 bytes."""

    utxo: Outpoint
    proof: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.utxo, Outpoint):
            raise TypeError(f"utxo must be an Outpoint, got {type(self.utxo).__name__}")
        proof = _as_bytes(self.proof, "proof")
        if len(proof) > _SMALL_BLOB_MAX:
            raise ValueError(f"proof must be at most {_SMALL_BLOB_MAX} bytes long, got {len(proof)}")
        object.__setattr__(self, "proof", proof)

    @classmethod
    def from_strict_val(cls, value: Mapping[str, Any]) -> ProofOfReserves:
        """Build from ``{"utxo": {"txid": bytes, "vout": int}, "proof": bytes}``."""
        if not isinstance(value, Mapping):
            raise TypeError(f"expected a mapping, got {type(value).__name__}")
        utxo = value["utxo"]
        if not isinstance(utxo, Mapping):
            raise TypeError(f"utxo must be a mapping, got {type(utxo).__name__}")
        outpoint = Outpoint(utxo["txid"], utxo["vout"])
        return cls(outpoint, value["proof"])