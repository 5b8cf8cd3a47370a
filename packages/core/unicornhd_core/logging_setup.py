"""JSON-lines logging for the driver tools.

The display core never logs; records come from the CLI layer around
opening the transport, sending frames, and transport failures.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from unicornhd_display.errors import TransportError

from .config import config_path


_LOGGER_NAME = "unicornhd"
ENV_LOG_LEVEL = "UNICORNHD_LOG_LEVEL"

# Extra record attributes copied into the JSON payload when present.
_FIELDS = ("event", "mode", "node", "rotation", "pattern", "frames_sent", "bytes_sent", "cause")


def log_dir() -> Path:
    path = config_path().parent / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    level = logging.getLevelName(name) if name else default
    return level if isinstance(level, int) else default


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for name in _FIELDS:
            if hasattr(record, name):
                payload[name] = getattr(record, name)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(
    keep_files: int = 7,
    console: bool = True,
    directory: Path | None = None,
) -> logging.Logger:
    """Attach a rotating JSON file handler once; later calls return the same logger."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(_level_from_env())
    target = directory or log_dir()
    target.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(target / "unicornhd.log"),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def log_transport_error(logger: logging.Logger, stage: str, exc: TransportError, **fields: Any) -> None:
    cause = exc.__cause__
    logger.error(
        f"{stage} failed: {exc.reason}",
        extra={
            "event": f"{stage}_failed",
            "cause": type(cause).__name__ if cause is not None else None,
            **fields,
        },
    )
