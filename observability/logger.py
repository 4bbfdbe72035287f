"""Structured event logging for the scheduling engine.

Every store mutation, invite dispatch and search evaluation goes through
``log_event``. Console and ``*-human.log`` get one readable line per event;
``LOG_FILE`` gets the same event as a JSON line for later inspection.
"""
from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
import time
import uuid
from typing import Any, Optional, Union

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENABLE_FILE_LOGS = os.getenv("ENABLE_FILE_LOGS", "1") in ("1", "true", "True")
LOG_FILE = os.getenv("LOG_FILE", "logs/scheduling.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", "5242880"))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "5"))

_HUMAN_FORMAT = "[%(asctime)s] %(levelname)s %(name)s :: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_HUMAN_KEYS = ("action", "outcome", "status", "date", "time", "conflict_id", "invite", "results", "ms")
_WARN_OUTCOMES = {"conflict", "rejected"}

_logger = logging.getLogger("scheduling")
_logger.setLevel(LOG_LEVEL)
_logger.propagate = False


def _is_json(record: logging.LogRecord) -> bool:
    return getattr(record, "is_json", False) is True


def _attach(handler: logging.Handler, *, json_lines: bool) -> None:
    handler.setLevel(LOG_LEVEL)
    if json_lines:
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.addFilter(_is_json)
    else:
        handler.setFormatter(logging.Formatter(_HUMAN_FORMAT, datefmt=_DATE_FORMAT))
        handler.addFilter(lambda record: not _is_json(record))
    _logger.addHandler(handler)


def _rotating(path: str) -> logging.Handler:
    return logging.handlers.RotatingFileHandler(path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)


def _ensure_handlers() -> None:
    if _logger.handlers:
        return

    _attach(logging.StreamHandler(stream=sys.stdout), json_lines=False)
    if not ENABLE_FILE_LOGS:
        return

    log_dir = os.path.dirname(LOG_FILE)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    stem = LOG_FILE[:-4] if LOG_FILE.endswith(".log") else LOG_FILE
    _attach(_rotating(LOG_FILE), json_lines=True)
    _attach(_rotating(f"{stem}-human.log"), json_lines=False)


def _level_for(fields: dict[str, Any]) -> int:
    if fields.get("outcome") in _WARN_OUTCOMES or fields.get("invite") == "failed":
        return logging.WARNING
    return logging.INFO


def _format_human(evt: dict[str, Any]) -> str:
    subject = evt.get("session_id")
    base = f"{evt.get('kind')} session={subject if subject is not None else '-'}"
    extras = [f"{key}={evt[key]}" for key in _HUMAN_KEYS if evt.get(key) is not None]
    return " ".join([base, *extras])


def _emit(level: int, msg: str, *, is_json: bool) -> None:
    record = _logger.makeRecord(_logger.name, level, "", 0, msg, (), None)
    record.is_json = is_json  # type: ignore[attr-defined]
    _logger.handle(record)


def log_event(kind: str, session_id: Optional[Union[int, str]], **fields: Any) -> None:
    """Log one scheduling event as a human line and, with file logs on, a JSON line."""

    _ensure_handlers()

    payload: dict[str, Any] = {
        "ts": time.time(),
        "trace": str(uuid.uuid4()),
        "kind": kind,
        "session_id": session_id,
    }
    payload.update(fields)
    level = _level_for(fields)

    _emit(level, _format_human(payload), is_json=False)
    if ENABLE_FILE_LOGS:
        _emit(level, json.dumps(payload, ensure_ascii=False, default=str), is_json=True)


__all__ = ["log_event"]
