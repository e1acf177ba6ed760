"""Audit trail for unlock and marking requests, plus application logging setup."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

AUDIT_DIR = Path(__file__).resolve().parent.parent / "logs"
AUDIT_FILE_NAME = "audit.log"
APP_LOG_FILE_NAME = "app.log"


def _ensure_log_dir():
    AUDIT_DIR.mkdir(parents=True, exist_ok=True)


def _iso_ts():
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def audit_log(
    action: str,
    status: str,
    *,
    word_count: int | None = None,
    gated: bool | None = None,
    answer_char_count: int | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """
    Append a structured audit entry to the audit log (JSONL).

    Entries describe the request outcome only. Answer text, access codes,
    tokens and scores are never written.
    """
    _ensure_log_dir()
    entry = {
        "timestamp": _iso_ts(),
        "action": action,
        "status": status,
    }
    if word_count is not None:
        entry["word_count"] = word_count
    if gated is not None:
        entry["gated"] = gated
    if answer_char_count is not None:
        entry["answer_char_count"] = answer_char_count
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(AUDIT_DIR / AUDIT_FILE_NAME, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def setup_app_logging():
    """Configure application logging to console and file."""
    _ensure_log_dir()
    logger = logging.getLogger("automarker")
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)

    fmt = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(ch)

    # File
    fh = logging.FileHandler(AUDIT_DIR / APP_LOG_FILE_NAME, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    logger.addHandler(fh)

    return logger
