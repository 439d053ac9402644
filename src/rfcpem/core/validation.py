from __future__ import annotations
from typing import Union

from .constants import DELIMITER_SUFFIX, HYPHEN, MAX_LABEL_LEN, SP
from .errors import BufferTooSmall, InvalidLabel

BytesLike = Union[bytes, bytearray, memoryview]

def as_bytes(data: Union[str, BytesLike], name: str = "input") -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"{name} must be str or bytes-like, not {type(data).__name__}")

def byte_view(data) -> memoryview:
    """Flat unsigned-byte view of a bytes-like object; len() counts bytes, not items."""
    view = memoryview(data)
    if view.ndim != 1 or view.format != "B":
        view = view.cast("B")
    return view

def writable_view(out) -> memoryview:
    """Return a flat, writable byte view over a caller-provided buffer."""
    view = byte_view(out)
    if view.readonly:
        raise TypeError("output buffer must be writable")
    return view

def ensure_capacity(view: memoryview, required: int) -> None:
    if len(view) < required:
        raise BufferTooSmall(required, len(view))

def _is_labelchar(c: int) -> bool:
    # labelchar = %x21-2C / %x2E-7E
    return 0x21 <= c <= 0x7E and c != HYPHEN

def validate_label(label: Union[str, BytesLike]) -> bytes:
    """Validate a label against the RFC 7468 grammar and return it as bytes.

        label = [ labelchar *( ["-" / SP] labelchar ) ]

    The empty label the grammar permits is rejected, as is anything longer
    than MAX_LABEL_LEN.
    """
    if isinstance(label, str):
        try:
            raw = label.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidLabel(f"label must be ASCII: {label!r}")
    else:
        raw = bytes(label)

    if not raw:
        raise InvalidLabel("label is empty")
    if len(raw) > MAX_LABEL_LEN:
        raise InvalidLabel(f"label too long: {len(raw)} > {MAX_LABEL_LEN}")
    if DELIMITER_SUFFIX in raw:
        raise InvalidLabel(f"label contains delimiter sequence: {raw!r}")

    prev_sep = True
    for c in raw:
        if _is_labelchar(c):
            prev_sep = False
        elif c in (HYPHEN, SP):
            if prev_sep:
                raise InvalidLabel(f"misplaced separator in label: {raw!r}")
            prev_sep = True
        else:
            raise InvalidLabel(f"invalid character 0x{c:02x} in label")
    if prev_sep:
        raise InvalidLabel(f"label ends with a separator: {raw!r}")
    return raw
