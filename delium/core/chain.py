# delium/core/chain.py
"""
Path-Chain Mangler — apply one mangle round per path segment, left to right.

  current = hex(A(text))
  for (suffix, stride) in parse_path(path):
      current = mangle(current + suffix, stride, repeat=1, A).hexdigest
  return current

A one-segment chain "suffix#N" therefore equals
mangle(hex(A(text)) + "suffix", N, 1, A).
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, Tuple, Union

from delium.core.digest import DigestAlgorithm, DigestResult, hex_digest
from delium.core.errors import MalformedPath
from delium.core.mangle import mangle
from delium.core.path import PathSegment, SegmentLike, parse_path
from delium.utils.hashing import TextLike


def apply_segments(
    text: TextLike,
    segments: Iterable[PathSegment],
    algorithm: DigestAlgorithm,
) -> str:
    """Run the chain over already-parsed segments; returns the final hex digest."""
    current = hex_digest(text, algorithm).decode("ascii")
    for seg in segments:
        current = mangle(current + seg.suffix, seg.stride, 1, algorithm).hexdigest
    return current


def mangle_chain(
    text: TextLike,
    path: Union[str, Sequence[SegmentLike]],
    algorithm: DigestAlgorithm | str = DigestAlgorithm.SHA256,
) -> DigestResult:
    """
    Mangle `text` through every segment of a path descriptor.

    Args:
      text: input string (UTF-8 encoded) or raw bytes
      path: descriptor such as "2h4usk#5/73uytg#9/#4", or a sequence of
        PathSegment / (suffix, stride) pairs
      algorithm: DigestAlgorithm or anything DigestAlgorithm.coerce accepts

    Raises:
      MalformedPath, InvalidStride (InvalidPathStride for non-numeric strides),
      UnsupportedAlgorithm. Nothing is hashed when the path is invalid.
    """
    algo = DigestAlgorithm.coerce(algorithm)
    if isinstance(path, str):
        segments = parse_path(path)
    else:
        segments = _coerce_segments(path)
    return DigestResult.from_hex(apply_segments(text, segments, algo))


def _coerce_segments(path: Any) -> Tuple[PathSegment, ...]:
    """Validate a pre-built segment sequence (PathSegment or (suffix, stride) items)."""
    if isinstance(path, (bytes, bytearray)) or not isinstance(path, Iterable):
        raise MalformedPath(f"path must be a string or a sequence of segments, got {type(path).__name__}")

    out = []
    for i, s in enumerate(path):
        if isinstance(s, PathSegment):
            out.append(s)
            continue
        try:
            suffix, stride = s
        except (TypeError, ValueError) as e:
            raise MalformedPath(f"segment {i}: expected (suffix, stride), got {s!r}") from e
        out.append(PathSegment(suffix=suffix, stride=stride))

    if not out:
        raise MalformedPath("path must contain at least one segment")
    return tuple(out)


def d256c(text: TextLike, path: str) -> DigestResult:
    """SHA-256 chained mangle."""
    return mangle_chain(text, path, DigestAlgorithm.SHA256)


def d512c(text: TextLike, path: str) -> DigestResult:
    """SHA-512 chained mangle."""
    return mangle_chain(text, path, DigestAlgorithm.SHA512)


__all__ = ["apply_segments", "mangle_chain", "d256c", "d512c"]
