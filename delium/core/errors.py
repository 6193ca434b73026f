# delium/core/errors.py
"""
Error taxonomy for the mangling primitives.

Intent
- Report bad caller input as typed exceptions instead of terminating the process.
- Keep every error a ValueError so generic callers can catch one thing.

Hierarchy
- DeliumError
  - InvalidStride        stride <= 0 or not an integer
    - InvalidPathStride  stride field of a path segment is not an integer literal
  - InvalidRepeat        repeat < 0 or not an integer
  - MalformedPath        path segment missing '#', or with more than one '#'
    - InvalidPathStride  (also a MalformedPath: the descriptor itself is wrong)
  - UnsupportedAlgorithm unknown digest selector
  - InvalidInput         input text is neither str nor bytes
"""

from __future__ import annotations


class DeliumError(ValueError):
    """Base class for all mangling input errors."""


class InvalidStride(DeliumError):
    """Deletion stride is not a positive integer."""


class InvalidRepeat(DeliumError):
    """Repeat count is not a non-negative integer."""


class MalformedPath(DeliumError):
    """Path descriptor does not follow `suffix#stride(/suffix#stride)*`."""


class InvalidPathStride(InvalidStride, MalformedPath):
    """Stride field inside a path descriptor does not parse as an integer."""


class UnsupportedAlgorithm(DeliumError):
    """Digest selector does not name SHA-256 or SHA-512."""


class InvalidInput(DeliumError):
    """Input to hash is neither text nor bytes."""


__all__ = [
    "DeliumError",
    "InvalidStride",
    "InvalidRepeat",
    "MalformedPath",
    "InvalidPathStride",
    "UnsupportedAlgorithm",
    "InvalidInput",
]
