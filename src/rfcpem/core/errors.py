from __future__ import annotations
from typing import Optional

class PemError(ValueError):
    """Base class for every rejection raised by the codec."""

class InvalidConfig(PemError):
    pass

class InvalidLabel(PemError):
    pass

class HeaderNotFound(PemError):
    pass

class FooterMismatch(PemError):
    pass

class UnexpectedEof(PemError):
    pass

class InvalidBase64Character(PemError):
    """A byte outside the base64 alphabet.

    ``offset`` indexes the buffer handed to the function that raised: the
    base64 characters for the ``b64*`` functions, the PEM text (UTF-8 encoded
    if it was a str) for everything in ``rfcpem.codec``.
    """

    def __init__(self, msg: str, offset: Optional[int] = None):
        super().__init__(msg)
        self.offset = offset

class InvalidPadding(PemError):
    pass

class InvalidBodyLength(PemError):
    pass

class BufferTooSmall(PemError):
    def __init__(self, required: int, available: int):
        super().__init__(f"output buffer too small: {available} < {required}")
        self.required = required
        self.available = available
