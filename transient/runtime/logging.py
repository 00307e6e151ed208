"""Transient display logging pipeline."""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from transient.api.config import TransientLoggingConfig
from transient.runtime.config import resolve_log_level_name

_QUEUE_LISTENER: QueueListener | None = None
# Attributes every LogRecord carries; anything else came in through `extra=`.
_RECORD_ATTRIBUTES = frozenset(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None).__dict__) | {
    "message",
    "asctime",
}
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; `extra=` fields are kept under `fields`."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRIBUTES}
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def configure_transient_logging(config: TransientLoggingConfig) -> None:
    """Replace root handlers according to `config`.

    Several sinks are fed through a queue listener so slow file writes stay off
    the input loop. With no sink enabled a `NullHandler` keeps logging quiet.
    """
    global _QUEUE_LISTENER

    shutdown_transient_logging()
    handlers = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    if len(handlers) <= 1:
        root.addHandler(handlers[0] if handlers else logging.NullHandler())
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_transient_logging() -> None:
    """Stop the queue listener, flushing queued records."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None


def setup_transient_logging() -> None:
    """Configure console logging unless the application already did."""
    if logging.getLogger().handlers:
        return
    configure_transient_logging(TransientLoggingConfig(level_name=resolve_log_level_name(default="INFO")))


def _build_handlers(config: TransientLoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []
    if config.console_enabled:
        console = logging.StreamHandler()
        console.setFormatter(_formatter_for(config.console_format))
        handlers.append(console)
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_formatter_for(config.file_format))
        handlers.append(file_handler)
    return handlers


def _formatter_for(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)
