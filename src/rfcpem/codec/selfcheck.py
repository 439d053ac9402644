from __future__ import annotations
import sys

import structlog

from ..core.config import PemConfig
from ..core.constants import LineEnding
from ..core.encoding import b64d
from ..core.errors import BufferTooSmall, FooterMismatch, PemError
from ..core.sizes import encoded_len
from .pem import decode, decode_into, decoded_len_of_text, encode

KNOWN_ANSWER = b"-----BEGIN CERTIFICATE-----\nAAEC\n-----END CERTIFICATE-----\n"

def configure_logger():
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    )
    return structlog.get_logger()

def require_crypto():
    try:
        from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
        from cryptography.hazmat.primitives import serialization
        return Ed25519PrivateKey, serialization
    except ImportError as e:
        raise RuntimeError("Missing dependency 'cryptography'") from e

def _crypto_interop() -> bool:
    Ed25519PrivateKey, serialization = require_crypto()
    key = Ed25519PrivateKey.generate()
    der = key.private_bytes(
        serialization.Encoding.DER, serialization.PrivateFormat.PKCS8, serialization.NoEncryption()
    )
    pem = key.private_bytes(
        serialization.Encoding.PEM, serialization.PrivateFormat.PKCS8, serialization.NoEncryption()
    )
    if decode(pem) != ("PRIVATE KEY", der) or encode("PRIVATE KEY", der) != pem:
        return False
    loaded = serialization.load_pem_private_key(encode("PRIVATE KEY", der), password=None)
    return loaded.private_bytes(
        serialization.Encoding.DER, serialization.PrivateFormat.PKCS8, serialization.NoEncryption()
    ) == der

def _sizes_exact() -> bool:
    for eol in LineEnding:
        for width in (4, 64, 76):
            config = PemConfig(line_width=width, eol=eol)
            for n in (0, 1, 2, 3, 47, 48, 49, 200):
                data = bytes(i % 256 for i in range(n))
                text = encode("TEST", data, config)
                if len(text) != encoded_len("TEST", len(data), config):
                    return False
                if decoded_len_of_text(text) != len(data):
                    return False
    return True

def security_self_check(logger):
    checks = []

    checks.append(("Python >= 3.9", sys.version_info >= (3, 9), "Python 3.9+ required"))

    try:
        ok = encode("CERTIFICATE", b"\x00\x01\x02") == KNOWN_ANSWER
        ok = ok and decode(KNOWN_ANSWER) == ("CERTIFICATE", b"\x00\x01\x02")
        checks.append(("Known answer", ok, "Known answer mismatch"))
    except PemError:
        checks.append(("Known answer", False, "Known answer rejected"))

    try:
        b64d(b"aW52YWxpZCBwYWRkaW5n")
        checks.append(("Base64 strict decode (valid)", True, ""))
    except PemError:
        checks.append(("Base64 strict decode (valid)", False, "Valid base64 rejected"))

    try:
        b64d(b"invalid!@#$")
        checks.append(("Base64 strict decode (invalid)", False, "Invalid base64 accepted"))
    except PemError:
        checks.append(("Base64 strict decode (invalid)", True, ""))

    try:
        decode(b"-----BEGIN A-----\nAAEC\n-----END B-----\n")
        checks.append(("Footer mismatch", False, "Mismatched footer accepted"))
    except FooterMismatch:
        checks.append(("Footer mismatch", True, ""))

    buf = bytearray(b"\xaa\xaa")
    try:
        decode_into(KNOWN_ANSWER, buf)
        checks.append(("Capacity check", False, "Short buffer accepted"))
    except BufferTooSmall:
        checks.append(("Capacity check", buf == b"\xaa\xaa", "Short buffer was written"))

    checks.append(("Size exactness", _sizes_exact(), "Computed length differs from output"))

    try:
        checks.append(("Cryptography interop", _crypto_interop(), "PEM differs from cryptography's"))
    except RuntimeError:
        checks.append(("Cryptography interop", False, "cryptography package not installed"))

    all_ok = True
    for name, ok, reason in checks:
        all_ok = all_ok and ok
        if ok:
            logger.info("security_check", check=name, status="OK")
        else:
            logger.error("security_check", check=name, status="FAILED", reason=reason)

    if not all_ok:
        raise RuntimeError("Security self-check failed")

    logger.info("security_self_check_passed")
    return True
