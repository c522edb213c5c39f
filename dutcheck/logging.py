"""Central logging helpers"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, MutableMapping
import structlog
import structlog.contextvars
import structlog.stdlib

from dutcheck.config import settings

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

EventDict = MutableMapping[str, Any]


def _build_file_handler(component: str) -> RotatingFileHandler:
    log_dir: Path = settings.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{component}.log"
    handler = RotatingFileHandler(log_path, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    return handler


def component_tagger(component: str) -> Callable[[Any, str, EventDict], EventDict]:
    """Processor stamping every event with the emitting component"""

    def _tag(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("component", component)
        return event_dict

    return _tag


def bind_run_context(**values: Any) -> None:
    """Attach values (e.g. run_id, seed) to every event logged from this context"""
    structlog.contextvars.bind_contextvars(**values)


def setup_logging(component: str = "dutcheck", level: int | str | None = None) -> None:
    """Configure structlog + stdlib logging for a component"""
    if level is None:
        level = settings.log_level
    handlers = [logging.StreamHandler(), _build_file_handler(component)]

    logging.basicConfig(level=level, handlers=handlers, format=_DEFAULT_FORMAT)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            component_tagger(component),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.getLogger(__name__).info("logging_initialized", extra={"component": component})
