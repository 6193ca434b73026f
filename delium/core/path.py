# delium/core/path.py
"""
Path descriptor parsing for the chained mangler.

Grammar
  path    := segment ("/" segment)*
  segment := suffix "#" stride
  suffix  := any run of characters except "/" and "#" (may be empty)
  stride  := decimal integer literal (optional sign), must be > 0

Example
  "2h4usk#5/73uytg#9/#4"
    -> (PathSegment("2h4usk", 5), PathSegment("73uytg", 9), PathSegment("", 4))

Failure policy
- The whole descriptor is parsed before any hashing; one bad segment fails the call.
- Nothing is coerced: a missing '#', an extra '#', an empty segment (empty path,
  trailing '/'), or a non-numeric stride are all errors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

from delium.core.errors import InvalidPathStride, InvalidStride, MalformedPath

SEGMENT_SEP = "/"
STRIDE_SEP = "#"

# ASCII digits only; int() alone would also accept "1_0", " 5" and non-ASCII digits.
_STRIDE_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class PathSegment:
    """One chain step: append `suffix`, then delete every `stride`-th char and re-hash."""
    suffix: str
    stride: int

    def __post_init__(self) -> None:
        if not isinstance(self.suffix, str):
            raise MalformedPath(f"suffix must be a string, got {self.suffix!r}")
        if SEGMENT_SEP in self.suffix or STRIDE_SEP in self.suffix:
            raise MalformedPath(
                f"suffix must not contain {SEGMENT_SEP!r} or {STRIDE_SEP!r}: {self.suffix!r}"
            )
        if not isinstance(self.stride, int) or isinstance(self.stride, bool):
            raise InvalidStride(f"stride must be an integer, got {self.stride!r}")
        if self.stride < 1:
            raise InvalidStride(f"stride must be >= 1, got {self.stride}")

    def __str__(self) -> str:
        return f"{self.suffix}{STRIDE_SEP}{self.stride}"


SegmentLike = Union[PathSegment, Tuple[str, int]]


def _parse_stride(text: str, index: int, raw: str) -> int:
    if not _STRIDE_RE.fullmatch(text):
        raise InvalidPathStride(
            f"segment {index} ({raw!r}): stride {text!r} is not an integer"
        )
    value = int(text)
    if value < 1:
        raise InvalidStride(f"segment {index} ({raw!r}): stride must be >= 1, got {value}")
    return value


def parse_segment(raw: str, index: int = 0) -> PathSegment:
    """Parse one `suffix#stride` clause."""
    parts = raw.split(STRIDE_SEP)
    if len(parts) != 2:
        raise MalformedPath(
            f"segment {index} ({raw!r}): expected exactly one {STRIDE_SEP!r}, "
            f"found {len(parts) - 1}"
        )
    suffix, stride_text = parts
    return PathSegment(suffix=suffix, stride=_parse_stride(stride_text, index, raw))


def parse_path(path: str) -> Tuple[PathSegment, ...]:
    """Parse a full descriptor into ordered segments (left to right)."""
    if not isinstance(path, str):
        raise MalformedPath(f"path must be a string, got {type(path).__name__}")
    return tuple(parse_segment(raw, i) for i, raw in enumerate(path.split(SEGMENT_SEP)))


def format_path(segments: Iterable[SegmentLike]) -> str:
    """
    Build a descriptor from segments or (suffix, stride) pairs.

    parse_path(format_path(segs)) == tuple(segs) for valid segments.
    """
    out = []
    for seg in segments:
        if not isinstance(seg, PathSegment):
            suffix, stride = seg
            seg = PathSegment(suffix=suffix, stride=stride)
        out.append(str(seg))
    if not out:
        raise MalformedPath("path must contain at least one segment")
    return SEGMENT_SEP.join(out)


__all__ = ["PathSegment", "parse_segment", "parse_path", "format_path"]
