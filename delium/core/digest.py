# delium/core/digest.py
"""
Digest selector + result value shared by both manglers.

Intent
- One enumerated selector for SHA-256 / SHA-512 so the mangling logic is written once.
- One immutable result type carrying the final digest as hex text and as ASCII bytes.

Byte form
- `DigestResult.data` holds the ASCII bytes of the hex string (same content as
  `hexdigest`), for both digest sizes.
- The binary digest is still available through `DigestResult.raw`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

from delium.core.errors import UnsupportedAlgorithm
from delium.utils.hashing import TextLike, encode_text, sha256_hex_bytes, sha512_hex_bytes

_HEX_RE = re.compile(r"[0-9a-f]*")
_ALGO_NAME_RE = re.compile(r"[\s_\-]+")


class DigestAlgorithm(str, Enum):
    """SHA-2 variant used for every hash in a mangling call."""

    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def coerce(cls, value: Any) -> "DigestAlgorithm":
        """
        Accept a member, a name ("sha256", "SHA-512", "sha_512") or a bit size (256 / 512).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            key = f"sha{value}"
        elif isinstance(value, str):
            key = _ALGO_NAME_RE.sub("", value.strip().lower())
            if key.isdigit():
                key = f"sha{key}"
        else:
            raise UnsupportedAlgorithm(f"Unsupported digest algorithm: {value!r}")

        for member in cls:
            if member.value == key:
                return member
        raise UnsupportedAlgorithm(
            f"Unsupported digest algorithm: {value!r}. Expected one of: sha256|sha512"
        )

    @property
    def digest_size(self) -> int:
        """Binary digest size in bytes (32 / 64)."""
        return 32 if self is DigestAlgorithm.SHA256 else 64

    @property
    def hex_length(self) -> int:
        """Length of the hex digest (64 / 128)."""
        return self.digest_size * 2

    def hexdigest_bytes(self, data: bytes) -> bytes:
        """Lowercase hex digest of `data` as ASCII bytes."""
        return _HEXDIGESTERS[self](data)


_HEXDIGESTERS: Dict[DigestAlgorithm, Callable[[bytes], bytes]] = {
    DigestAlgorithm.SHA256: sha256_hex_bytes,
    DigestAlgorithm.SHA512: sha512_hex_bytes,
}

_BY_HEX_LENGTH = {a.hex_length: a for a in DigestAlgorithm}


def hex_digest(text: TextLike, algorithm: DigestAlgorithm) -> bytes:
    """Hex digest (ASCII bytes) of a text or bytes input."""
    return algorithm.hexdigest_bytes(encode_text(text))


@dataclass(frozen=True)
class DigestResult:
    """Final digest of a mangling call: hex text and its ASCII bytes."""
    data: bytes
    hexdigest: str

    def __post_init__(self) -> None:
        if len(self.hexdigest) not in _BY_HEX_LENGTH or not _HEX_RE.fullmatch(self.hexdigest):
            raise ValueError(
                f"hexdigest must be 64 or 128 lowercase hex chars, got {self.hexdigest!r}"
            )
        if self.data != self.hexdigest.encode("ascii"):
            raise ValueError("data must be the ASCII bytes of hexdigest")

    @classmethod
    def from_hex(cls, hexdigest: str | bytes) -> "DigestResult":
        """Build both views from a single hex value (text or ASCII bytes)."""
        if isinstance(hexdigest, (bytes, bytearray)):
            data = bytes(hexdigest)
            return cls(data=data, hexdigest=data.decode("ascii"))
        return cls(data=hexdigest.encode("ascii"), hexdigest=hexdigest)

    @property
    def raw(self) -> bytes:
        """Binary digest (32 / 64 bytes)."""
        return bytes.fromhex(self.hexdigest)

    @property
    def algorithm(self) -> DigestAlgorithm:
        """Digest algorithm implied by the hex length."""
        return _BY_HEX_LENGTH[len(self.hexdigest)]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly view (hex text is the canonical, stable representation)."""
        return {
            "hexdigest": self.hexdigest,
            "algorithm": self.algorithm.value,
            "length": len(self.hexdigest),
        }

    def __str__(self) -> str:
        return self.hexdigest


__all__ = ["DigestAlgorithm", "DigestResult", "hex_digest"]
