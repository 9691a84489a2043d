"""JSON logging utilities."""

from __future__ import annotations

import json
import logging
import sys
import uuid
from typing import Any, Optional

_RESERVED = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        log_entry: dict[str, Any] = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)
        extra = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if extra:
            log_entry.update(extra)
        return json.dumps(log_entry, default=str)


class RunIdFilter(logging.Filter):
    """Stamp every record with the id of the current run unless the caller set one."""

    def __init__(self, run_id: str) -> None:
        super().__init__()
        self.run_id = run_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "run_id"):
            record.run_id = self.run_id
        return True


def configure_logging(
    level: str = "INFO",
    json_output: bool = True,
    stream=None,
    run_id: Optional[str] = None,
) -> None:
    # stderr keeps stdout free for command output
    handler = logging.StreamHandler(stream or sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    if run_id:
        handler.addFilter(RunIdFilter(run_id))
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_run_id() -> str:
    return str(uuid.uuid4())


__all__ = ["configure_logging", "get_logger", "get_run_id", "JsonFormatter", "RunIdFilter"]
