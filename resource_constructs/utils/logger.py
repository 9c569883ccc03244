"""Structured JSON logger for synthesis-time diagnostics.

Emits one JSON object per record with the environment name and, when
available, the construct path the message relates to.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        env = getattr(record, "environment", None) or os.environ.get("ENVIRONMENT")
        if env:
            payload["environment"] = env
        path = getattr(record, "construct_path", None)
        if path:
            payload["construct_path"] = path
        if not hasattr(record, "asctime"):
            payload["timestamp"] = record.created
        return json.dumps(payload, ensure_ascii=False, default=str)


class _Adapter(logging.LoggerAdapter):
    def process(self, msg: Any, kwargs: Dict[str, Any]):  # type: ignore[override]
        extra = self.extra.copy() if isinstance(self.extra, dict) else {}
        if "extra" in kwargs and isinstance(kwargs["extra"], dict):
            extra.update(kwargs["extra"])  # merge per-call extras
        kwargs["extra"] = extra
        return msg, kwargs


def _level_from_env() -> int:
    """Level named by LOG_LEVEL; unknown names fall back to INFO."""
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, construct_path: Optional[str] = None) -> logging.LoggerAdapter:
    """Return a JSON-formatted logger adapter with an optional construct_path."""
    base = logging.getLogger(name)
    if not base.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        base.addHandler(handler)
    base.setLevel(_level_from_env())
    extras: Dict[str, Any] = {"environment": os.environ.get("ENVIRONMENT")}
    if construct_path:
        extras["construct_path"] = construct_path
    return _Adapter(base, extras)
