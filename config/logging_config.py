"""Loguru logging setup.

Every record is written as one JSON object per line. The transcoder's
contextualize() keys (dialect, platform) become top-level fields, and
records at ERROR and above are duplicated into error.log next to the main
file. Stdlib logging is funneled into loguru.
"""

import json
import logging
import os

from loguru import logger

from .settings import Settings, get_settings

_configured = False

_CONTEXT_KEYS = ("dialect", "platform")


def _json_line(record) -> str:
    """Serialize a record into extra["_json"] and return the format template."""
    extra = record["extra"]
    payload = {
        "time": str(record["time"]),
        "level": record["level"].name,
        "message": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }
    for key in _CONTEXT_KEYS:
        if extra.get(key) is not None:
            payload[key] = extra[key]
    if record["exception"] is not None:
        payload["exception"] = repr(record["exception"].value)
    extra["_json"] = json.dumps(payload, default=str, ensure_ascii=False)
    return "{extra[_json]}\n"


def _add_json_sink(path: str, level: str) -> None:
    logger.add(path, level=level, format=_json_line, encoding="utf-8", mode="a")


class InterceptHandler(logging.Handler):
    """Redirect stdlib logging to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(
    log_file: str, *, level: str = "DEBUG", force: bool = False
) -> None:
    """Send loguru output to log_file (and error.log) as JSON lines.

    Idempotent unless force=True.
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    logger.remove()
    _add_json_sink(log_file, level)
    _add_json_sink(os.path.join(os.path.dirname(log_file), "error.log"), "ERROR")

    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(logging.DEBUG)


def setup_logging(settings: Settings | None = None, *, force: bool = False) -> None:
    """Configure logging from Settings.log_file and Settings.log_level."""
    settings = settings or get_settings()
    configure_logging(settings.log_file, level=settings.log_level, force=force)
