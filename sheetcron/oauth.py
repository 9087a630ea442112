# sheetcron/oauth.py
"""
Service-account OAuth: trade a self-signed JWT for a short-lived bearer token
(RFC 7523 JWT bearer grant). Every call re-authenticates; nothing is cached.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .assertion import TOKEN_URL, build_assertion
from .config import Config
from .errors import MissingAccessTokenError, TokenExchangeError
from .signer import RSASigner, Signer
from .transport import HttpClient, new_session

JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"

log = logging.getLogger(__name__)


def exchange_assertion(assertion: str, http: Optional[HttpClient] = None) -> str:
    if http is None:
        with new_session() as s:
            return exchange_assertion(assertion, s)

    r = http.post(
        TOKEN_URL,
        data={"grant_type": JWT_BEARER_GRANT, "assertion": assertion},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    if not r.ok:
        raise TokenExchangeError(r.status_code, r.text)

    try:
        data = r.json()
    except ValueError as e:
        raise TokenExchangeError(r.status_code, r.text) from e

    token = data.get("access_token") if isinstance(data, dict) else None
    if not token or not isinstance(token, str):
        raise MissingAccessTokenError(r.status_code, r.text)
    log.debug(f"Token endpoint returned a {data.get('token_type', 'bearer')} token")
    return token


def get_google_access_token(
    config: Config,
    signer: Optional[Signer] = None,
    http: Optional[HttpClient] = None,
    clock: Callable[[], float] = time.time,
) -> str:
    if signer is None:
        signer = RSASigner.from_pem(config.private_key)
    assertion = build_assertion(config.client_email, signer, clock=clock)
    return exchange_assertion(assertion, http)
