from __future__ import annotations
import base64

from .constants import B64_ALPHABET, PAD
from .errors import InvalidBase64Character, InvalidBodyLength, InvalidPadding
from .validation import BytesLike, byte_view, ensure_capacity, writable_view

_DECODE = [-1] * 256
for _i, _c in enumerate(B64_ALPHABET):
    _DECODE[_c] = _i
del _i, _c

def b64_encoded_len(n: int) -> int:
    return (n + 2) // 3 * 4

def b64e(b: BytesLike) -> bytes:
    """Encode bytes to padded standard base64."""
    return base64.b64encode(byte_view(b))

def b64e_into(b: BytesLike, out) -> int:
    b = byte_view(b)
    view = writable_view(out)
    n = b64_encoded_len(len(b))
    ensure_capacity(view, n)
    view[:n] = base64.b64encode(b)
    return n

def b64_validate(s: BytesLike) -> int:
    """Check s against the strict base64 grammar and return its padding count.

    Whitespace is not accepted here; line endings must already be removed.
    """
    s = byte_view(s)
    n = len(s)
    if n % 4 == 1:
        raise InvalidBodyLength(f"base64 length {n} is not a valid group size")
    if n % 4:
        raise InvalidPadding(f"base64 length {n} is missing padding")

    padding = 0
    for i, c in enumerate(s):
        if c == PAD:
            if i < n - 2:
                raise InvalidPadding(f"padding at offset {i} before final group")
            padding += 1
        elif padding:
            raise InvalidPadding(f"data after padding at offset {i}")
        elif _DECODE[c] < 0:
            raise InvalidBase64Character(f"invalid base64 character 0x{c:02x} at offset {i}", offset=i)

    # the bits dropped by padding must be zero, otherwise two encodings decode alike
    if padding == 2 and _DECODE[s[n - 3]] & 0x0F:
        raise InvalidPadding("non-zero trailing bits before '=='")
    if padding == 1 and _DECODE[s[n - 2]] & 0x03:
        raise InvalidPadding("non-zero trailing bits before '='")
    return padding

def b64d(s: BytesLike) -> bytes:
    """Decode strict base64 with validation."""
    b64_validate(s)
    return base64.b64decode(bytes(s), validate=True)

def b64d_into(s: BytesLike, out) -> int:
    s = byte_view(s)
    view = writable_view(out)
    padding = b64_validate(s)
    n = len(s) // 4 * 3 - padding
    ensure_capacity(view, n)
    view[:n] = base64.b64decode(bytes(s), validate=True)
    return n
