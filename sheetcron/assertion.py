# sheetcron/assertion.py
from __future__ import annotations

import json
import time
from typing import Callable, Dict, Union

from .encoding import b64url_encode
from .signer import Signer

SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"
TOKEN_URL = "https://oauth2.googleapis.com/token"
TOKEN_LIFETIME = 3600  # seconds, Google's maximum for a JWT bearer grant

HEADER = {"alg": "RS256", "typ": "JWT"}


def _compact_json(obj: Dict) -> str:
    return json.dumps(obj, separators=(",", ":"))


def build_claims(client_email: str, scope: str, audience: str, issued_at: int) -> Dict[str, Union[str, int]]:
    return {
        "iss": client_email,
        "scope": scope,
        "aud": audience,
        "exp": issued_at + TOKEN_LIFETIME,
        "iat": issued_at,
    }


def build_assertion(
    client_email: str,
    signer: Signer,
    scope: str = SHEETS_SCOPE,
    audience: str = TOKEN_URL,
    clock: Callable[[], float] = time.time,
) -> str:
    """
    Build the compact, RS256-signed JWT that a service account presents to the
    OAuth token endpoint:

        b64url(header) "." b64url(claims) "." b64url(signature)

    The signature covers the first two segments exactly as they appear in the
    returned string.
    """
    claims = build_claims(client_email, scope, audience, int(clock()))
    signing_input = f"{b64url_encode(_compact_json(HEADER))}.{b64url_encode(_compact_json(claims))}"
    signature = signer.sign(signing_input.encode("ascii"))
    return f"{signing_input}.{b64url_encode(signature)}"
