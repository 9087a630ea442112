"""
Pytest configuration and shared fixtures.

Keys are generated once per session; HTTP traffic goes through FakeHttp,
which records each call and replays queued requests.Response objects.
"""

import json
from typing import Any, Dict, List, Optional, Union

import pytest
import requests
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from sheetcron.config import Config


def make_response(status: int, body: Union[str, Dict, List, None] = "") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
        r.headers["Content-Type"] = "application/json"
    r._content = (body or "").encode("utf-8")
    r.encoding = "utf-8"
    return r


class FakeHttp:
    """Stands in for requests.Session."""

    def __init__(self, *responses: requests.Response):
        self.responses: List[requests.Response] = list(responses)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected POST to {url}")
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeHttp":
        return self

    def __exit__(self, *exc: Any) -> Optional[bool]:
        self.close()
        return None


class FakeSigner:
    def __init__(self, signature: bytes = b"signature"):
        self.signature = signature
        self.messages: List[bytes] = []

    def sign(self, message: bytes) -> bytes:
        self.messages.append(message)
        return self.signature


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


@pytest.fixture(scope="session")
def private_der(rsa_key) -> bytes:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def escaped_pem(private_pem) -> str:
    """The key as it usually arrives through an env var: newlines as literal \\n."""
    return private_pem.replace("\n", "\\n")


@pytest.fixture(scope="session")
def public_pem(rsa_key) -> str:
    return rsa_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture
def config(escaped_pem) -> Config:
    return Config(
        client_email="logger@demo-project.iam.gserviceaccount.com",
        private_key=escaped_pem,
        sheet_id="1AbCdEfGhIjK",
        sheet_name="Cron Log",
        sheet_range="A1:C1",
    )
