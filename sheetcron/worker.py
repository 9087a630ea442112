# sheetcron/worker.py
"""
The two entry points of the worker.

- handle_request: answers any HTTP request with a fixed greeting.
- handle_scheduled: on each timer tick, authenticates as the service account
  and appends one [timestamp, source, status] row to the log sheet.

The scheduled path is best-effort telemetry. Failures are logged and swallowed
so the hosting scheduler always sees a completed run.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from .config import Config
from .logging_utils import get_logger
from .oauth import get_google_access_token
from .sheet import append_row
from .signer import Signer
from .transport import HttpClient, new_session

GREETING = "cf-hell0-world up"
SOURCE_LABEL = "cf-hell0-world"
STATUS_OK = "ok"

TEXT_HEADERS = {"Content-Type": "text/plain; charset=utf-8"}


def now_iso(now: Optional[datetime] = None) -> str:
    """UTC timestamp with milliseconds and a Z suffix, e.g. 2026-10-19T08:00:00.123Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_row(now: Optional[datetime] = None) -> List[str]:
    # status is "ok" for every row written; an accepted append is the only check made
    return [now_iso(now), SOURCE_LABEL, STATUS_OK]


def handle_request(request: Any = None) -> Tuple[str, int, Dict[str, str]]:
    return GREETING, 200, dict(TEXT_HEADERS)


def handle_scheduled(
    config: Config,
    event: Any = None,
    *,
    signer: Optional[Signer] = None,
    http: Optional[HttpClient] = None,
    logger: Optional[logging.Logger] = None,
    now: Optional[datetime] = None,
) -> bool:
    """
    Run one scheduled invocation. Returns True when the row was appended and
    False when any stage failed. Never raises.
    """
    log = logger or get_logger()
    row = build_row(now)
    ts = row[0]

    owns_session = http is None
    session = new_session() if owns_session else http
    try:
        token = get_google_access_token(config, signer=signer, http=session)
        append_row(config, token, row, http=session)
        log.info(f"Logged cron to Sheets: {ts}")
        return True
    except Exception as e:
        log.error(f"Sheets logging failed: {e}")
        return False
    finally:
        if owns_session:
            session.close()
