"""JSON logging with stable schema."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from causechain.common.constants import JSON_LOG_FIELDS, LOGGER_NAME
from causechain.common.fs import ensure_dir
from causechain.common.time_utils import utc_timestamp_iso

RESERVED_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": utc_timestamp_iso(),
            "level": record.levelname,
            "target": getattr(record, "target", None),
            "event": getattr(record, "event", None),
            "status": getattr(record, "status", None),
            "depth": getattr(record, "depth", None),
            "error_type": getattr(record, "error_type", None),
            "is_root": getattr(record, "is_root", None),
            "error_code": getattr(record, "error_code", None),
            "message": record.getMessage(),
        }
        for field in JSON_LOG_FIELDS:
            payload.setdefault(field, None)
        return json.dumps(payload, ensure_ascii=False)


def build_logger(name: str = LOGGER_NAME, level: str = "INFO", log_path: Path | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stream = logging.StreamHandler()
    stream.setFormatter(JsonLineFormatter())
    logger.addHandler(stream)

    if log_path is not None:
        ensure_dir(log_path.parent)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(JsonLineFormatter())
        logger.addHandler(file_handler)

    return logger


def check_event_fields(event_fields: dict[str, Any]) -> None:
    clashes = RESERVED_RECORD_FIELDS.intersection(event_fields)
    if clashes:
        raise ValueError(f"Event fields clash with LogRecord attributes: {', '.join(sorted(clashes))}")


def log_event(logger: logging.Logger, message: str, **event_fields: Any) -> None:
    check_event_fields(event_fields)
    logger.info(message, extra=event_fields)
