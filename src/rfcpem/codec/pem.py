"""RFC 7468 textual encoding.

The ``*_into`` functions write into a caller-provided buffer that the caller
sizes with :mod:`rfcpem.core.sizes`; capacity is checked before the first
byte is written. ``encode``/``decode`` allocate the exact size and delegate.
"""
from __future__ import annotations
from typing import Tuple, Union

from ..core.config import DEFAULT_CONFIG, PemConfig
from ..core.encoding import b64_validate, b64d_into, b64e
from ..core.errors import InvalidBase64Character
from ..core.lines import text_offset, unwrap, wrap_into
from ..core.sizes import decoded_len, encoded_len
from ..core.validation import BytesLike, as_bytes, byte_view, ensure_capacity, validate_label, writable_view
from .boundary import scan, write_footer_into, write_header_into

TextLike = Union[str, BytesLike]

def encode_into(label: TextLike, data: BytesLike, out, config: PemConfig = DEFAULT_CONFIG) -> int:
    raw_label = validate_label(label)
    data = byte_view(data)
    view = writable_view(out)
    total = encoded_len(raw_label, len(data), config)
    ensure_capacity(view, total)

    eol = config.eol_bytes
    pos = write_header_into(view, 0, raw_label, eol)
    pos = wrap_into(b64e(data), view, pos, config.line_width, eol)
    pos = write_footer_into(view, pos, raw_label, eol)
    return pos

def encode(label: TextLike, data: BytesLike, config: PemConfig = DEFAULT_CONFIG) -> bytes:
    data = byte_view(data)
    out = bytearray(encoded_len(label, len(data), config))
    encode_into(label, data, out, config)
    return bytes(out)

def encode_str(label: TextLike, data: BytesLike, config: PemConfig = DEFAULT_CONFIG) -> str:
    return encode(label, data, config).decode("ascii")

def _body(text: TextLike) -> Tuple[str, bytes, int]:
    raw = as_bytes(text, "text")
    boundary = scan(raw)
    chars = unwrap(raw, boundary.body_start, boundary.body_end)
    try:
        padding = b64_validate(chars)
    except InvalidBase64Character as e:
        offset = text_offset(raw, boundary.body_start, boundary.body_end, e.offset)
        raise InvalidBase64Character(
            f"invalid base64 character 0x{raw[offset]:02x} at offset {offset}", offset=offset
        ) from None
    return boundary.label, chars, decoded_len(len(chars), padding)

def decoded_len_of_text(text: TextLike) -> int:
    """Exact size of the buffer decode_into needs for text."""
    return _body(text)[2]

def decode_label(text: TextLike) -> str:
    return scan(text).label

def decode_into(text: TextLike, out) -> Tuple[str, int]:
    view = writable_view(out)
    label, chars, n = _body(text)
    ensure_capacity(view, n)
    return label, b64d_into(chars, view)

def decode(text: TextLike) -> Tuple[str, bytes]:
    label, chars, n = _body(text)
    out = bytearray(n)
    b64d_into(chars, out)
    return label, bytes(out)
