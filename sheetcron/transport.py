# sheetcron/transport.py
from __future__ import annotations

from typing import Any, Protocol

import requests

from .config import USER_AGENT


class HttpClient(Protocol):
    """The slice of requests.Session the Google calls rely on."""

    def post(self, url: str, **kwargs: Any) -> requests.Response: ...


def new_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": USER_AGENT})
    return s

