# src/utils/logging.py
"""Root logger setup for the bot.

LOG_FORMAT=json emits one JSON object per line, tagged with the Slack
trigger_id of the command being handled; anything else uses plain text.
"""

import json
import logging
from contextvars import ContextVar
from typing import Any

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# trigger_id (or view id) of the Slack interaction being processed
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def set_request_id(request_id: str) -> None:
    """Tag subsequent log lines of this task with a Slack interaction id."""
    request_id_var.set(request_id)


def get_request_id() -> str:
    return request_id_var.get()


class StructuredFormatter(logging.Formatter):
    """Render records as JSON lines.

    Keys: timestamp, level, logger, message, plus request_id when a
    command is being handled and exception when a traceback is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if request_id := get_request_id():
            entry["request_id"] = request_id
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def configure_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure root logging from LOG_LEVEL / LOG_FORMAT settings.

    Args:
        level: Level name such as "DEBUG" or "INFO"; unknown names mean INFO.
        fmt: "json" for structured output, anything else for plain text.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    if fmt.lower() != "json":
        logging.basicConfig(level=numeric_level, format=TEXT_FORMAT)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(numeric_level)
