from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Union

from ..core.constants import BEGIN_PREFIX, DELIMITER_SUFFIX, END_PREFIX
from ..core.errors import FooterMismatch, HeaderNotFound, UnexpectedEof
from ..core.lines import next_line, strip_trailing_ws
from ..core.validation import BytesLike, as_bytes, validate_label
from .state import ScanState

@dataclass(frozen=True)
class Boundary:
    """Offsets of one encapsulated block inside a larger buffer.

    ``body_start:body_end`` covers the wrapped base64 lines including their
    line endings; ``end`` is where scanning for a following block resumes.
    """
    label: str
    begin: int
    body_start: int
    body_end: int
    end: int

def _write(view: memoryview, pos: int, *parts: bytes) -> int:
    for part in parts:
        view[pos:pos + len(part)] = part
        pos += len(part)
    return pos

def write_header_into(view: memoryview, pos: int, label: bytes, eol: bytes) -> int:
    return _write(view, pos, BEGIN_PREFIX, label, DELIMITER_SUFFIX, eol)

def write_footer_into(view: memoryview, pos: int, label: bytes, eol: bytes) -> int:
    return _write(view, pos, END_PREFIX, label, DELIMITER_SUFFIX, eol)

def _header_label(line: bytes):
    min_len = len(BEGIN_PREFIX) + len(DELIMITER_SUFFIX)
    if len(line) < min_len or not line.startswith(BEGIN_PREFIX) or not line.endswith(DELIMITER_SUFFIX):
        return None
    return validate_label(line[len(BEGIN_PREFIX):-len(DELIMITER_SUFFIX)])

def scan(data: Union[str, BytesLike], start: int = 0) -> Boundary:
    """Find the first complete BEGIN/END block at or after start.

    Anything before the header line is skipped. Once a header is found the
    block must be closed by a footer with the same label; no partial result
    is ever returned.
    """
    data = as_bytes(data, "text")
    n = len(data)
    state = ScanState.SEEKING_HEADER
    pos = start
    label = begin = body_start = body_end = end = None

    while state is not ScanState.DONE:
        if state is ScanState.SEEKING_HEADER:
            if pos >= n:
                raise HeaderNotFound("no '-----BEGIN <label>-----' line found")
            s, e, nxt, eol_len = next_line(data, pos)
            found = _header_label(data[s:strip_trailing_ws(data, s, e)])
            if found is not None:
                if not eol_len:
                    raise UnexpectedEof("input ends after header line")
                label, begin, body_start = found, s, nxt
                state = ScanState.IN_BODY
            pos = nxt

        elif state is ScanState.IN_BODY:
            if pos >= n:
                raise UnexpectedEof("input ends before footer line")
            s, e, nxt, eol_len = next_line(data, pos)
            if data.startswith(END_PREFIX, s):
                body_end = s
                state = ScanState.SEEKING_FOOTER
                continue
            if not eol_len:
                raise UnexpectedEof("input ends inside body")
            pos = nxt

        elif state is ScanState.SEEKING_FOOTER:
            s, e, nxt, _ = next_line(data, pos)
            line = data[s:strip_trailing_ws(data, s, e)]
            expected = END_PREFIX + label + DELIMITER_SUFFIX
            if line != expected:
                raise FooterMismatch(f"expected {expected!r}, found {line!r}")
            end = nxt
            state = ScanState.DONE

    return Boundary(label=label.decode("ascii"), begin=begin, body_start=body_start, body_end=body_end, end=end)

def find_boundaries(data: Union[str, BytesLike], start: int = 0) -> Iterator[Boundary]:
    """Yield each block in a buffer of concatenated PEM documents."""
    data = as_bytes(data, "text")
    pos = start
    while True:
        try:
            boundary = scan(data, pos)
        except HeaderNotFound:
            return
        yield boundary
        pos = boundary.end
