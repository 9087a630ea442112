#!/usr/bin/env python3
"""
Scheduled entrypoint: one invocation appends one log row.
Point cron, Cloud Scheduler or a CI schedule at `python -m sheetcron.main`.

Environment variables expected:
  GOOGLE_CLIENT_EMAIL  (required)  – Service account email (client_email in the SA JSON).
  GOOGLE_PRIVATE_KEY   (required)  – PKCS8 PEM private key; literal "\\n" escapes are fine.
  SHEET_ID             (required)  – Google Sheet ID (not URL).
  SHEET_NAME           (optional)  – Worksheet/tab name (default "Sheet1").
  SHEET_RANGE          (optional)  – Range the table starts at (default "A1").
  LOG_LEVEL            (optional)  – Default "INFO".

Exits 1 only when configuration is missing. A failed Sheets write is logged
and the process still exits 0.
"""

from __future__ import annotations

import sys

from .config import Config
from .logging_utils import get_logger
from .worker import handle_scheduled

LOG = get_logger("sheetcron")


def run() -> int:
    config = Config.from_env()
    missing = config.missing()
    if missing:
        LOG.error(f"Missing configuration: {', '.join(missing)}. Set them in the scheduler env.")
        return 1

    handle_scheduled(config, logger=LOG)
    return 0


if __name__ == "__main__":
    sys.exit(run())
