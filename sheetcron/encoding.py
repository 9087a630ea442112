# sheetcron/encoding.py
from __future__ import annotations

import base64
import binascii
import re
from typing import Union

from .errors import KeyImportError

_PEM_BEGIN = re.compile(r"-----BEGIN [^-]+-----")
_PEM_END = re.compile(r"-----END [^-]+-----")
_WS = re.compile(r"\s+")


def b64url_encode(data: Union[bytes, str]) -> str:
    """URL-safe base64 with the trailing '=' padding removed."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def normalize_pem(pem: str) -> str:
    # env vars usually carry the key with literal "\n" sequences
    return (pem or "").replace("\\n", "\n")


def pem_to_der(pem: str) -> bytes:
    """
    Strip the BEGIN/END armour lines and all whitespace from a PEM block and
    return the decoded DER bytes.
    """
    body = _PEM_BEGIN.sub("", pem or "", count=1)
    body = _PEM_END.sub("", body, count=1)
    body = _WS.sub("", body)
    if not body:
        raise KeyImportError("Private key PEM contains no key material")
    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise KeyImportError(f"Private key PEM is not valid base64: {e}") from e
