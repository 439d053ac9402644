from __future__ import annotations
import re
from typing import Iterator, Tuple

from .constants import CR, LF, TRAILING_WS
from .errors import InvalidBase64Character

_EOL = re.compile(rb"[\r\n]")

def next_line(data: bytes, pos: int) -> Tuple[int, int, int, int]:
    """Locate the line starting at pos.

    Returns (start, end, next_pos, eol_len); eol_len is 0 when the line runs
    to the end of data. CRLF is matched before a lone CR, so a CRLF pair never
    leaves a stray LF behind as an empty line.
    """
    n = len(data)
    # stops at the first CR or LF, so each byte is looked at once per scan
    m = _EOL.search(data, pos)
    if m is None:
        return pos, n, n, 0
    i = m.start()
    if data[i] == CR and i + 1 < n and data[i + 1] == LF:
        return pos, i, i + 2, 2
    return pos, i, i + 1, 1

def strip_trailing_ws(data: bytes, start: int, end: int) -> int:
    while end > start and data[end - 1] in TRAILING_WS:
        end -= 1
    return end

def body_lines(data: bytes, start: int, end: int) -> Iterator[Tuple[int, int]]:
    """Yield (start, end) of each body line with eol and trailing blanks removed."""
    pos = start
    while pos < end:
        s, e, nxt, _ = next_line(data, pos)
        e = strip_trailing_ws(data, s, min(e, end))
        for ws in (b" ", b"\t"):
            i = data.find(ws, s, e)
            if i != -1:
                raise InvalidBase64Character(f"whitespace inside body line at offset {i}", offset=i)
        yield s, e
        pos = min(nxt, end)

def unwrapped_len(data: bytes, start: int, end: int) -> int:
    return sum(e - s for s, e in body_lines(data, start, end))

def unwrap(data: bytes, start: int, end: int) -> bytes:
    return b"".join(data[s:e] for s, e in body_lines(data, start, end))

def text_offset(data: bytes, start: int, end: int, index: int) -> int:
    """Map an index into the unwrapped stream back to an offset in data."""
    for s, e in body_lines(data, start, end):
        if index < e - s:
            return s + index
        index -= e - s
    raise IndexError(f"index {index} beyond unwrapped body")

def wrap_into(chars: bytes, view: memoryview, pos: int, line_width: int, eol: bytes) -> int:
    """Write chars as eol-terminated lines of line_width into view at pos.

    The caller has already sized view; returns the position after the body.
    """
    if not chars:
        view[pos:pos + len(eol)] = eol
        return pos + len(eol)
    for i in range(0, len(chars), line_width):
        line = chars[i:i + line_width]
        view[pos:pos + len(line)] = line
        pos += len(line)
        view[pos:pos + len(eol)] = eol
        pos += len(eol)
    return pos
