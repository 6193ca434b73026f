# tests/test_mangle_core.py
from __future__ import annotations

import hashlib

import pytest

from delium.core.digest import DigestAlgorithm
from delium.core.errors import InvalidInput, InvalidRepeat, InvalidStride
from delium.core.mangle import d256, d512, delete_every_nth, mangle, mangle_round

_HASHERS = {
    DigestAlgorithm.SHA256: hashlib.sha256,
    DigestAlgorithm.SHA512: hashlib.sha512,
}


def _delete_by_char(s: str, stride: int) -> str:
    """Character-indexed reference: keep chars whose 1-based position is not a multiple of stride."""
    out = ""
    for pos, ch in enumerate(s, start=1):
        if pos % stride != 0:
            out += ch
    return out


def _reference_mangle(text: str, stride: int, repeat: int, algo: DigestAlgorithm) -> str:
    h = _HASHERS[algo]
    s = h(text.encode("utf-8")).hexdigest()
    for _ in range(repeat):
        s = h(_delete_by_char(s, stride).encode("ascii")).hexdigest()
    return s


# -------------------------
# delete_every_nth
# -------------------------
def test_delete_every_nth_basic():
    assert delete_every_nth(b"123456789", 3) == b"124578"
    assert delete_every_nth(b"123456789", 2) == b"13579"


def test_delete_every_nth_stride_one_empties():
    assert delete_every_nth(b"abcdef", 1) == b""


def test_delete_every_nth_stride_longer_than_input_keeps_all():
    assert delete_every_nth(b"abc", 4) == b"abc"
    assert delete_every_nth(b"abc", 1000) == b"abc"


def test_delete_every_nth_stride_equal_to_length_drops_last():
    assert delete_every_nth(b"abcd", 4) == b"abc"


def test_delete_every_nth_empty_input():
    assert delete_every_nth(b"", 3) == b""


@pytest.mark.parametrize("algo", list(DigestAlgorithm))
def test_byte_deletion_equals_char_deletion_on_hex(algo):
    # Hex digests are pure ASCII, so byte and character positions coincide.
    s = _HASHERS[algo](b"equivalence").hexdigest()
    for stride in range(1, len(s) + 3):
        assert delete_every_nth(s.encode("ascii"), stride).decode("ascii") == _delete_by_char(s, stride)


# -------------------------
# mangle
# -------------------------
@pytest.mark.parametrize("algo", list(DigestAlgorithm))
def test_zero_repeat_is_plain_digest(algo):
    for stride in (1, 3, 500):
        r = mangle("hello", stride, 0, algo)
        assert r.hexdigest == _HASHERS[algo](b"hello").hexdigest()


@pytest.mark.parametrize("algo", list(DigestAlgorithm))
def test_stride_one_collapses_to_empty_hash(algo):
    r = mangle("anything at all", 1, 1, algo)
    assert r.hexdigest == _HASHERS[algo](b"").hexdigest()


@pytest.mark.parametrize("algo", list(DigestAlgorithm))
def test_stride_longer_than_hex_rehashes_hex_unchanged(algo):
    plain = _HASHERS[algo](b"hello").hexdigest()
    r = mangle("hello", 1000, 1, algo)
    assert r.hexdigest == _HASHERS[algo](plain.encode("ascii")).hexdigest()


@pytest.mark.parametrize(
    "text, stride, repeat",
    [
        ("hello", 3, 1),
        ("hello", 3, 5),
        ("", 2, 3),
        ("héllo wörld", 7, 2),
        ("seed", 64, 4),
    ],
)
@pytest.mark.parametrize("algo", list(DigestAlgorithm))
def test_mangle_matches_reference(text, stride, repeat, algo):
    assert mangle(text, stride, repeat, algo).hexdigest == _reference_mangle(text, stride, repeat, algo)


@pytest.mark.parametrize("stride, repeat", [(1, 1), (2, 0), (3, 5), (9, 2), (200, 3)])
def test_output_length_is_fixed(stride, repeat):
    assert len(mangle("hello", stride, repeat, DigestAlgorithm.SHA256).hexdigest) == 64
    assert len(mangle("hello", stride, repeat, DigestAlgorithm.SHA512).hexdigest) == 128


def test_mangle_is_deterministic():
    a = mangle("hello", 3, 5, DigestAlgorithm.SHA256)
    b = mangle("hello", 3, 5, DigestAlgorithm.SHA256)
    assert a == b
    assert a.data == b.data


def test_mangle_differs_from_plain_hash():
    assert mangle("hello", 3, 1).hexdigest != hashlib.sha256(b"hello").hexdigest()


def test_mangle_result_views_consistent():
    r = mangle("hello", 3, 2, DigestAlgorithm.SHA512)
    assert r.data == r.hexdigest.encode("ascii")
    assert r.algorithm is DigestAlgorithm.SHA512


def test_default_algorithm_is_sha256():
    assert mangle("hello", 3, 1) == mangle("hello", 3, 1, DigestAlgorithm.SHA256)


def test_algorithm_accepts_string_selector():
    assert mangle("hello", 3, 1, "sha512") == mangle("hello", 3, 1, DigestAlgorithm.SHA512)


def test_bytes_input_equals_utf8_text():
    assert mangle("héllo".encode("utf-8"), 4, 2) == mangle("héllo", 4, 2)


def test_mangle_round_single_step():
    plain = hashlib.sha256(b"x").hexdigest().encode("ascii")
    out = mangle_round(plain, 5, DigestAlgorithm.SHA256)
    assert out.decode("ascii") == mangle("x", 5, 1).hexdigest


@pytest.mark.parametrize("stride", [0, -1, -64, True, 2.5, "3", None])
def test_invalid_stride_rejected(stride):
    with pytest.raises(InvalidStride):
        mangle("hello", stride, 1)


@pytest.mark.parametrize("repeat", [-1, False, 1.0, "2", None])
def test_invalid_repeat_rejected(repeat):
    with pytest.raises(InvalidRepeat):
        mangle("hello", 3, repeat)


def test_stride_validated_even_when_repeat_zero():
    with pytest.raises(InvalidStride):
        mangle("hello", 0, 0)


def test_named_entrypoints():
    assert d256("hello", 3, 5) == mangle("hello", 3, 5, DigestAlgorithm.SHA256)
    assert d512("hello", 3, 5) == mangle("hello", 3, 5, DigestAlgorithm.SHA512)


# -------------------------
# Pinned vectors
# -------------------------
def test_hello_stride3_one_round_sha256_pinned():
    # sha256("hello") with every 3rd hex char removed:
    # "2c24bafba3e2e8b2c59e9eb11ec1a72573436238984" (43 chars), then re-hashed.
    assert delete_every_nth(
        b"2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824", 3
    ) == b"2c24bafba3e2e8b2c59e9eb11ec1a72573436238984"
    r = mangle("hello", 3, 1, DigestAlgorithm.SHA256)
    assert r.hexdigest == "5cbc49346b0568426b03bf84e9087353f080e286a42570accc3794e8308f1b00"
    assert r.data == b"5cbc49346b0568426b03bf84e9087353f080e286a42570accc3794e8308f1b00"


def test_non_text_input_rejected():
    with pytest.raises(InvalidInput):
        mangle(None, 3, 1)  # type: ignore[arg-type]
    with pytest.raises(InvalidInput):
        mangle(12345, 3, 1)  # type: ignore[arg-type]
