"""Strict base64 engine tests."""

from array import array

import pytest

from rfcpem.core.encoding import b64_encoded_len, b64_validate, b64d, b64d_into, b64e, b64e_into
from rfcpem.core.errors import BufferTooSmall, InvalidBase64Character, InvalidBodyLength, InvalidPadding


def test_encode_basic():
    assert b64e(b"hello world") == b"aGVsbG8gd29ybGQ="


def test_encode_empty():
    assert b64e(b"") == b""
    assert b64_encoded_len(0) == 0


@pytest.mark.parametrize("n, expected", [(1, 4), (2, 4), (3, 4), (4, 8), (48, 64), (49, 68)])
def test_encoded_len(n, expected):
    assert b64_encoded_len(n) == expected
    assert len(b64e(bytes(n))) == expected


def test_decode_basic():
    assert b64d(b"aGVsbG8gd29ybGQ=") == b"hello world"


def test_decode_empty():
    assert b64d(b"") == b""


@pytest.mark.parametrize("chars, padding", [(b"YWJj", 0), (b"YWI=", 1), (b"YQ==", 2), (b"", 0)])
def test_validate_returns_padding(chars, padding):
    assert b64_validate(chars) == padding


def test_decode_rejects_bad_character():
    with pytest.raises(InvalidBase64Character) as exc:
        b64d(b"YW*j")
    assert exc.value.offset == 2


def test_decode_rejects_whitespace():
    with pytest.raises(InvalidBase64Character):
        b64d(b"YW J")


def test_decode_rejects_urlsafe_alphabet():
    with pytest.raises(InvalidBase64Character):
        b64d(b"-_-_")


def test_decode_rejects_single_char_remainder():
    with pytest.raises(InvalidBodyLength):
        b64d(b"YWJjZ")


@pytest.mark.parametrize("chars", [b"YQ", b"YWI"])
def test_decode_rejects_missing_padding(chars):
    with pytest.raises(InvalidPadding):
        b64d(chars)


@pytest.mark.parametrize("chars", [b"====", b"Y===", b"YQ=A", b"YQ==YQ==", b"=WJj"])
def test_decode_rejects_misplaced_padding(chars):
    with pytest.raises(InvalidPadding):
        b64d(chars)


@pytest.mark.parametrize("chars", [b"YR==", b"YWJ="])
def test_decode_rejects_noncanonical_trailing_bits(chars):
    with pytest.raises(InvalidPadding):
        b64d(chars)


def test_decode_rejects_non_ascii():
    with pytest.raises(InvalidBase64Character):
        b64d("YWé".encode("utf-8"))


def test_encode_into_exact_buffer():
    out = bytearray(4)
    assert b64e_into(b"abc", out) == 4
    assert out == b"YWJj"


def test_encode_into_short_buffer_writes_nothing():
    out = bytearray(3)
    with pytest.raises(BufferTooSmall):
        b64e_into(b"abc", out)
    assert out == bytearray(3)


def test_decode_into_memoryview():
    backing = bytearray(b"\xff" * 8)
    n = b64d_into(b"YWI=", memoryview(backing)[2:])
    assert n == 2
    assert backing == b"\xff\xffab\xff\xff\xff\xff"


def test_decode_into_short_buffer_writes_nothing():
    out = bytearray(b"\x11\x11")
    with pytest.raises(BufferTooSmall) as exc:
        b64d_into(b"YWJj", out)
    assert (exc.value.required, exc.value.available) == (3, 2)
    assert out == b"\x11\x11"


def test_decode_into_readonly_buffer():
    with pytest.raises(TypeError):
        b64d_into(b"YWJj", bytes(3))


def test_encode_counts_bytes_not_items():
    payload = memoryview(array("H", [0x4142, 0x4344]))
    out = bytearray(8)
    assert b64e_into(payload, out) == 8
    assert out == b64e(payload.tobytes())


def test_validate_offset_is_stream_index():
    with pytest.raises(InvalidBase64Character) as exc:
        b64_validate(b"AAAAAA*A")
    assert exc.value.offset == 6
