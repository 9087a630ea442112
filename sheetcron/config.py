# sheetcron/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import List

# -------------------------
# Helpers to read env vars
# -------------------------
def _get(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is None:
        return default
    s = str(v).strip()
    return s if s != "" else default

def _getint(name: str, default: int) -> int:
    v = os.getenv(name)
    try:
        s = "" if v is None else str(v).strip()
        return int(s) if s != "" else default
    except ValueError:
        return default

# ----------------------------------
# Required auth / Google Sheet info
# ----------------------------------
ENV_NAMES = {
    "client_email": "GOOGLE_CLIENT_EMAIL",
    "private_key":  "GOOGLE_PRIVATE_KEY",   # PEM, "\n" escapes allowed
    "sheet_id":     "SHEET_ID",
    "sheet_name":   "SHEET_NAME",
    "sheet_range":  "SHEET_RANGE",
}

DEFAULT_SHEET_NAME  = "Sheet1"
DEFAULT_SHEET_RANGE = "A1"

# -----------------------
# Runtime knobs
# -----------------------
LOG_LEVEL = _get("LOG_LEVEL", "INFO").upper()
PORT      = _getint("PORT", 8080)

USER_AGENT = _get("USER_AGENT", "sheetcron/0.1 (+python-requests)")


@dataclass(frozen=True)
class Config:
    """Credentials and sheet identifiers for one scheduled run."""

    client_email: str
    private_key: str
    sheet_id: str
    sheet_name: str = DEFAULT_SHEET_NAME
    sheet_range: str = DEFAULT_SHEET_RANGE

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            client_email=_get(ENV_NAMES["client_email"]),
            # "\n" escapes are left in place; RSASigner.from_pem normalizes them
            private_key=_get(ENV_NAMES["private_key"]),
            sheet_id=_get(ENV_NAMES["sheet_id"]),
            sheet_name=_get(ENV_NAMES["sheet_name"], DEFAULT_SHEET_NAME),
            sheet_range=_get(ENV_NAMES["sheet_range"], DEFAULT_SHEET_RANGE),
        )

    def missing(self) -> List[str]:
        """Env var names whose values are empty."""
        return [ENV_NAMES[f.name] for f in fields(self) if not getattr(self, f.name)]
