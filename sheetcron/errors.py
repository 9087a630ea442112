# sheetcron/errors.py
from __future__ import annotations

from typing import Optional


class SheetCronError(RuntimeError):
    """Base class for every failure raised by the Google auth / Sheets path."""


class KeyImportError(SheetCronError):
    """The service-account private key could not be parsed into an RSA signing key."""


class _HttpFailure(SheetCronError):
    prefix = "Request failed"

    def __init__(self, status: Optional[int], body: str = "", message: Optional[str] = None):
        self.status = status
        self.body = body
        super().__init__(message or f"{self.prefix}: {status} {body}")


class TokenExchangeError(_HttpFailure):
    prefix = "Failed to fetch Google access token"


class MissingAccessTokenError(TokenExchangeError):
    """Token endpoint answered 2xx but the JSON carried no usable access_token."""

    def __init__(self, status: Optional[int], body: str = ""):
        super().__init__(status, body, message="No access token returned from Google")


class SheetAppendError(_HttpFailure):
    prefix = "Failed to append to sheet"
