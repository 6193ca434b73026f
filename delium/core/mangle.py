# delium/core/mangle.py
"""
Digest Mangler — hash, delete every N-th hex character, re-hash (repeat times).

Algorithm
  s0 = hex(A(text))
  for each round: s_i = hex(A(s_{i-1} with every stride-th char removed))
  return s_repeat

Deletion rule
- Positions are 1-based: characters at positions stride, 2*stride, ... are removed.
- stride == 1 removes everything, so the round hashes the empty string.
- stride > len(s) removes nothing.
- Deletion works on the ASCII bytes of the hex digest; for hex text this is the
  same as deleting by character.
"""

from __future__ import annotations

from typing import Any

from delium.core.digest import DigestAlgorithm, DigestResult, hex_digest
from delium.core.errors import InvalidRepeat, InvalidStride
from delium.utils.hashing import TextLike


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def validate_stride(stride: Any) -> int:
    """Return stride if it is an int >= 1, else raise InvalidStride."""
    if not _is_int(stride):
        raise InvalidStride(f"stride must be an integer, got {stride!r}")
    if stride < 1:
        raise InvalidStride(f"stride must be >= 1, got {stride}")
    return stride


def validate_repeat(repeat: Any) -> int:
    """Return repeat if it is an int >= 0, else raise InvalidRepeat."""
    if not _is_int(repeat):
        raise InvalidRepeat(f"repeat must be an integer, got {repeat!r}")
    if repeat < 0:
        raise InvalidRepeat(f"repeat must be >= 0, got {repeat}")
    return repeat


def delete_every_nth(data: bytes, stride: int) -> bytes:
    """
    Drop every byte whose 1-based position is a multiple of stride.

    Keeps the (stride - 1)-long run in front of each deleted position.
    """
    keep = stride - 1
    if keep == 0:
        return b""
    return b"".join(data[i : i + keep] for i in range(0, len(data), stride))


def mangle_round(hexdigest: bytes, stride: int, algorithm: DigestAlgorithm) -> bytes:
    """One round: delete every stride-th char of a hex digest, then re-hash."""
    return algorithm.hexdigest_bytes(delete_every_nth(hexdigest, stride))


def mangle(
    text: TextLike,
    stride: int,
    repeat: int,
    algorithm: DigestAlgorithm | str = DigestAlgorithm.SHA256,
) -> DigestResult:
    """
    Mangle the digest of `text` over `repeat` deletion/re-hash rounds.

    Args:
      text: input string (UTF-8 encoded) or raw bytes
      stride: deletion interval (>= 1)
      repeat: number of rounds (>= 0); 0 returns the plain digest
      algorithm: DigestAlgorithm or anything DigestAlgorithm.coerce accepts

    Raises:
      InvalidStride, InvalidRepeat, UnsupportedAlgorithm
    """
    validate_stride(stride)
    validate_repeat(repeat)
    algo = DigestAlgorithm.coerce(algorithm)

    current = hex_digest(text, algo)
    for _ in range(repeat):
        current = mangle_round(current, stride, algo)
    return DigestResult.from_hex(current)


def d256(text: TextLike, stride: int, repeat: int) -> DigestResult:
    """SHA-256 mangle."""
    return mangle(text, stride, repeat, DigestAlgorithm.SHA256)


def d512(text: TextLike, stride: int, repeat: int) -> DigestResult:
    """SHA-512 mangle."""
    return mangle(text, stride, repeat, DigestAlgorithm.SHA512)


__all__ = [
    "validate_stride",
    "validate_repeat",
    "delete_every_nth",
    "mangle_round",
    "mangle",
    "d256",
    "d512",
]
