"""
Logging setup shared by the Streamlit page and the login smoke check.
Call setup_logging() once at startup; modules only ever call getLogger(__name__).
"""
import json
import logging
import os
from typing import Optional, Union

from .config import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL

_RESERVED = frozenset(
    (
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    )
)

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, including any extra= fields such as file_name."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and value is not None:
                log[key] = value
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, default=str)


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    raw = level if level is not None else os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    if isinstance(raw, int):
        return raw
    value = logging.getLevelName(str(raw).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Optional[Union[int, str]] = None, json_output: bool = False) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    logging.basicConfig(level=resolve_level(level), handlers=[handler], force=True)
