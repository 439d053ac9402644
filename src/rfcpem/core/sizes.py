"""Exact output lengths, computed before any encode or decode.

Every function here agrees byte-for-byte with what the codec writes; none of
them return an upper bound.
"""
from __future__ import annotations
from typing import Union

from .config import PemConfig, eol_bytes
from .constants import BEGIN_PREFIX, DELIMITER_SUFFIX, END_PREFIX, LineEnding
from .encoding import b64_encoded_len, b64_validate
from .errors import InvalidBodyLength, InvalidPadding
from .validation import BytesLike, validate_label

EolLike = Union[LineEnding, bytes]

def header_len(label: Union[str, BytesLike], eol: EolLike) -> int:
    return len(BEGIN_PREFIX) + len(validate_label(label)) + len(DELIMITER_SUFFIX) + len(eol_bytes(eol))

def footer_len(label: Union[str, BytesLike], eol: EolLike) -> int:
    return len(END_PREFIX) + len(validate_label(label)) + len(DELIMITER_SUFFIX) + len(eol_bytes(eol))

def wrapped_body_len(char_count: int, line_width: int, eol: EolLike) -> int:
    # an empty body is still one (empty) line terminated by eol
    lines = max(1, -(-char_count // line_width))
    return char_count + lines * len(eol_bytes(eol))

def encoded_len(label: Union[str, BytesLike], payload_len: int, config: PemConfig) -> int:
    if payload_len < 0:
        raise ValueError(f"payload_len must be non-negative: {payload_len}")
    body = wrapped_body_len(b64_encoded_len(payload_len), config.line_width, config.eol)
    return header_len(label, config.eol) + body + footer_len(label, config.eol)

def decoded_len(char_count: int, padding: int) -> int:
    """Bytes produced by a base64 body of char_count characters.

    The final group decides the remainder: ``xxxx`` gives 3 bytes, ``xxx=``
    gives 2 and ``xx==`` gives 1. Anything else is rejected.
    """
    if char_count < 0:
        raise ValueError(f"char_count must be non-negative: {char_count}")
    if char_count % 4:
        raise InvalidBodyLength(f"base64 length {char_count} is not a multiple of 4")
    if padding not in (0, 1, 2):
        raise InvalidPadding(f"padding must be 0, 1 or 2, got {padding}")
    if padding and not char_count:
        raise InvalidPadding("padding without data")
    return char_count // 4 * 3 - padding

def decoded_len_of(chars: BytesLike) -> int:
    return decoded_len(len(chars), b64_validate(chars))
