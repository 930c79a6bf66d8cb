"""Structured logging for action runs.

Events go through structlog into stdlib logging, so each configured output
(stderr, stdout or a file) gets its own level and renderer. Runs on an
Actions runner carry the workflow run id on every event.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from covcomment.config.models import LoggingConfig, LogOutputConfig

_LEVELS = logging.getLevelNamesMapping()

# httpx logs every request at INFO
_NOISY_LOGGERS = ("httpx", "httpcore")


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if run_id := os.environ.get("GITHUB_RUN_ID"):
        event_dict.setdefault("run_id", run_id)
    return event_dict


_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    _add_run_id,  # type: ignore[list-item]
]


def _level(name: str | None, default: int) -> int:
    return _LEVELS.get((name or "").upper(), default)


def _formatter(output: LogOutputConfig) -> logging.Formatter:
    if output.format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        colors = output.destination in ("stderr", "stdout") and stream.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def _handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def configure_logging(config: LoggingConfig | None = None, *, level: str = "INFO") -> None:
    """Route structlog events to the outputs in ``config``.

    Without a config, logs go to stderr in console format at ``level``. The
    CLI uses that before settings are loaded and switches to the loaded
    ``LoggingConfig`` afterwards. Calling again replaces all root handlers.
    """
    from covcomment.config.models import LoggingConfig

    if config is None:
        config = LoggingConfig(level=level)

    root_level = _level(config.level, logging.INFO)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(root_level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    for output in config.outputs:
        handler = _handler(output.destination)
        handler.setLevel(_level(output.level, root_level))
        handler.setFormatter(_formatter(output))
        root.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for ``name``; the name is bound as the ``logger`` field."""
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger  # type: ignore[no-any-return]
