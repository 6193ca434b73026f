# delium/utils/hashing.py
"""
Hashing utilities (SHA-2 hex digests as ASCII bytes)

Intent
- Keep the hashlib calls and the text -> bytes encoding in one place so every
  mangling round hashes exactly the same bytes.
- Return hex digests as ASCII bytes: the mangler deletes characters by byte
  index, and hex text is pure ASCII, so byte and character positions coincide.

Notes
- Text is encoded as UTF-8 (replacement on lone surrogates).
- These are deterministic fingerprints, not a key-derivation function.
"""

from __future__ import annotations

from hashlib import sha256, sha512
from typing import Union

from delium.core.errors import InvalidInput

TextLike = Union[str, bytes]


def encode_text(s: TextLike) -> bytes:
    """
    Bytes to hash for a text input (UTF-8, replacement on errors).
    Bytes / bytearray inputs pass through unchanged; anything else raises InvalidInput.
    """
    if isinstance(s, (bytes, bytearray)):
        return bytes(s)
    if not isinstance(s, str):
        raise InvalidInput(f"input must be str or bytes, got {type(s).__name__}")
    return s.encode("utf-8", errors="replace")


def sha256_hex_bytes(data: bytes) -> bytes:
    """
    SHA-256 lowercase hex digest of raw bytes, as 64 ASCII bytes.
    """
    return sha256(data).hexdigest().encode("ascii")


def sha512_hex_bytes(data: bytes) -> bytes:
    """
    SHA-512 lowercase hex digest of raw bytes, as 128 ASCII bytes.
    """
    return sha512(data).hexdigest().encode("ascii")


__all__ = ["TextLike", "encode_text", "sha256_hex_bytes", "sha512_hex_bytes"]
