from __future__ import annotations
from enum import Enum

# RFC 7468 section 2
BEGIN_PREFIX = b"-----BEGIN "
END_PREFIX = b"-----END "
DELIMITER_SUFFIX = b"-----"

PEM_LINE_WIDTH = 64

# Not fixed by RFC 7468; long enough for every label in section 4 of the RFC.
MAX_LABEL_LEN = 64

MAX_CUSTOM_EOL_LEN = 2

CR = 0x0D
LF = 0x0A
SP = 0x20
HT = 0x09
HYPHEN = 0x2D
PAD = 0x3D

TRAILING_WS = (SP, HT)

B64_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

class LineEnding(Enum):
    LF = b"\n"
    CRLF = b"\r\n"
    CR = b"\r"
