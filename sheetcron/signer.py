# sheetcron/signer.py
from __future__ import annotations

import logging
from typing import Protocol

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .encoding import normalize_pem, pem_to_der
from .errors import KeyImportError

log = logging.getLogger(__name__)


class Signer(Protocol):
    def sign(self, message: bytes) -> bytes: ...


class RSASigner:
    """RSASSA-PKCS1-v1_5 / SHA-256 signer, i.e. the JWS "RS256" algorithm."""

    def __init__(self, private_key: rsa.RSAPrivateKey):
        self._key = private_key

    @classmethod
    def from_pem(cls, pem: str) -> "RSASigner":
        """
        Accepts a PKCS8 "BEGIN PRIVATE KEY" block, as found in the
        private_key field of a service account JSON file. Literal "\\n"
        escapes are turned into newlines first.
        """
        der = pem_to_der(normalize_pem(pem))
        try:
            key = serialization.load_der_private_key(der, password=None)
        except (ValueError, TypeError) as e:
            raise KeyImportError(f"Could not import PKCS8 private key: {e}") from e
        if not isinstance(key, rsa.RSAPrivateKey):
            raise KeyImportError(f"Expected an RSA private key, got {type(key).__name__}")
        log.debug(f"Imported {key.key_size}-bit RSA signing key")
        return cls(key)

    def sign(self, message: bytes) -> bytes:
        return self._key.sign(message, padding.PKCS1v15(), hashes.SHA256())
