from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .constants import CR, LF, MAX_CUSTOM_EOL_LEN, PEM_LINE_WIDTH, LineEnding
from .errors import InvalidConfig

def eol_bytes(eol: Union[LineEnding, bytes]) -> bytes:
    """Resolve a line ending to its byte sequence.

    Custom sequences are limited to short runs of CR/LF so that the decoder,
    which recognises CR, LF and CRLF per line, can read back what was written.
    """
    if isinstance(eol, LineEnding):
        return eol.value
    if not isinstance(eol, (bytes, bytearray)):
        raise InvalidConfig(f"eol must be LineEnding or bytes, not {type(eol).__name__}")
    raw = bytes(eol)
    if not (1 <= len(raw) <= MAX_CUSTOM_EOL_LEN):
        raise InvalidConfig(f"custom eol must be 1-{MAX_CUSTOM_EOL_LEN} bytes: {raw!r}")
    if any(c not in (CR, LF) for c in raw):
        raise InvalidConfig(f"custom eol may only contain CR and LF: {raw!r}")
    return raw

@dataclass(frozen=True)
class PemConfig:
    line_width: int = PEM_LINE_WIDTH
    eol: Union[LineEnding, bytes] = LineEnding.LF

    def __post_init__(self):
        if isinstance(self.line_width, bool) or not isinstance(self.line_width, int):
            raise InvalidConfig("line_width must be an int")
        if self.line_width < 1:
            raise InvalidConfig(f"line_width must be positive: {self.line_width}")
        eol_bytes(self.eol)

    @property
    def eol_bytes(self) -> bytes:
        return eol_bytes(self.eol)

DEFAULT_CONFIG = PemConfig()
