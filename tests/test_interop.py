"""Interoperability with the PEM produced and consumed by cryptography."""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519

from rfcpem.codec.pem import decode, encode
from rfcpem.core.config import PemConfig
from rfcpem.core.constants import LineEnding


def _pkcs8(key, encoding):
    return key.private_bytes(encoding, serialization.PrivateFormat.PKCS8, serialization.NoEncryption())


@pytest.mark.parametrize(
    "generate", [ed25519.Ed25519PrivateKey.generate, lambda: ec.generate_private_key(ec.SECP384R1())]
)
def test_matches_cryptography_private_key_pem(generate):
    key = generate()
    der = _pkcs8(key, serialization.Encoding.DER)
    pem = _pkcs8(key, serialization.Encoding.PEM)
    assert encode("PRIVATE KEY", der) == pem
    assert decode(pem) == ("PRIVATE KEY", der)


def test_cryptography_loads_our_public_key():
    key = ec.generate_private_key(ec.SECP256R1()).public_key()
    der = key.public_bytes(serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo)
    loaded = serialization.load_pem_public_key(encode("PUBLIC KEY", der))
    assert loaded.public_bytes(serialization.Encoding.DER, serialization.PublicFormat.SubjectPublicKeyInfo) == der


def test_crlf_pem_loads_in_cryptography():
    der = _pkcs8(ed25519.Ed25519PrivateKey.generate(), serialization.Encoding.DER)
    text = encode("PRIVATE KEY", der, PemConfig(eol=LineEnding.CRLF))
    loaded = serialization.load_pem_private_key(text, password=None)
    assert _pkcs8(loaded, serialization.Encoding.DER) == der
