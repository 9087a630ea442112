from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import quote

from .config import Config
from .errors import SheetAppendError
from .transport import HttpClient, new_session

SHEETS_API = "https://sheets.googleapis.com/v4/spreadsheets"

# what encodeURIComponent leaves alone, on top of quote()'s own "_.-~"
_URI_COMPONENT_SAFE = "!*'()"


def _escape(part: str) -> str:
    return quote(part, safe=_URI_COMPONENT_SAFE)


def append_url(sheet_id: str, sheet_name: str, sheet_range: str) -> str:
    return (
        f"{SHEETS_API}/{_escape(sheet_id)}/values/"
        f"{_escape(sheet_name)}!{_escape(sheet_range)}:append?valueInputOption=USER_ENTERED"
    )


def append_row(config: Config, token: str, row: Sequence, http: Optional[HttpClient] = None) -> None:
    """
    Append one row below the table found at config.sheet_range.
    A 2xx answer is taken as success; nothing is read back.
    """
    if http is None:
        with new_session() as s:
            return append_row(config, token, row, s)

    r = http.post(
        append_url(config.sheet_id, config.sheet_name, config.sheet_range),
        json={"values": [list(row)]},
        headers={
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        },
    )
    if not r.ok:
        raise SheetAppendError(r.status_code, r.text)
