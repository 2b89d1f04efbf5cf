"""Logging pipeline for geometry diagnostics.

Geometry code only ever asks for a logger; handlers are installed by the host
application through `configure_logging`, or from `ADAM_LOG_*` environment
variables through `setup_logging`.
"""

from __future__ import annotations

import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from adam.api.logging import GeometryLoggingConfig
from adam.diagnostics.json_codec import dumps_text
from adam.runtime.debug_config import load_debug_config

_QUEUE_LISTENER: QueueListener | None = None
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# Attributes every record carries; anything else arrived through `extra=`.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `extra=` values land under `fields`."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def load_logging_config() -> GeometryLoggingConfig:
    """Build a logging config from `ADAM_LOG_*` environment variables."""
    cfg = load_debug_config()
    return GeometryLoggingConfig(
        level_name=cfg.log_level,
        console_format=cfg.log_format,
        file_path=cfg.log_file,
    )


def configure_logging(config: GeometryLoggingConfig) -> None:
    """Replace root handlers; a file sink is fed through a queue listener."""
    global _QUEUE_LISTENER

    shutdown_logging()
    handlers = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Drain the queue and close the listener's handlers, if running."""
    global _QUEUE_LISTENER

    listener = _QUEUE_LISTENER
    if listener is None:
        return
    _QUEUE_LISTENER = None
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def setup_logging() -> None:
    """Configure logging from the environment unless the host already did."""
    if logging.getLogger().handlers:
        return
    configure_logging(load_logging_config())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _build_handlers(config: GeometryLoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_formatter(config.console_format))
    if not config.file_path:
        return [console]
    file_path = Path(config.file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    file_handler.setFormatter(_formatter(config.file_format))
    return [console, file_handler]


def _formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
    "load_logging_config",
    "setup_logging",
    "shutdown_logging",
]
