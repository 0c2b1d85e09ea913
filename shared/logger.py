"""
Warden Structured Logger
=========================

Provides :class:`WardenLogger`, a logging facade bound to one Warden
component. Records go to a Rich console handler on stderr and,
optionally, to a rotating file as plain text or JSON lines.

Passwords, hashes and digests are never passed to the logger; callers log
lengths, counts and timings only.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextvars import ContextVar, Token
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_ROOT_NAMESPACE = "warden"

# Active operation for the current thread or task. Worker threads only see
# it when their callable runs inside a copied context.
_OPERATION: ContextVar[str | None] = ContextVar("warden_operation", default=None)


class _JSONFormatter(logging.Formatter):
    """Emit each log record as a single-line JSON object.

    Output fields::

        {"timestamp": "...", "level": "INFO", "logger": "warden.hashing",
         "message": "...", "component": "hashing", "operation": "batch",
         "extra": {...}, "exc_info": "..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for attr in ("component", "operation"):
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        extra = getattr(record, "warden_extra", None)
        if extra is not None:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class _ColorConsoleHandler(RichHandler):
    """:class:`rich.logging.RichHandler` writing to stderr with the Warden theme."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            console=Console(theme=_LOG_THEME, stderr=True),
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
            **kwargs,
        )


class WardenLogger:
    """Context-aware logger for one Warden component.

    Usage::

        log = WardenLogger("hashing", log_file="warden.log", json_logs=True)
        with log.operation("batch"):
            log.info("Hashing %d passwords", len(passwords), workers=4)

    Keyword arguments other than ``exc_info``/``stack_info``/``stacklevel``
    are collected into the record's ``extra`` payload.

    Args:
        component:       Component name; the stdlib logger is ``warden.<component>``.
        log_level:       Minimum severity name.
        log_file:        Rotating log file path, or ``None`` for no file output.
        json_logs:       Write JSON lines instead of plain text to *log_file*.
        max_bytes:       Rotation size in bytes.
        backup_count:    Rotated files to keep.
        console_output:  Attach the Rich stderr handler.
        propagate:       Forward records to ancestor loggers.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
        propagate: bool = False,
    ) -> None:
        self._component = component
        level = getattr(logging, log_level.upper(), logging.INFO)

        self._logger = logging.getLogger(f"{_ROOT_NAMESPACE}.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = propagate

        # Re-instantiation must not stack handlers.
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_ColorConsoleHandler(level=level))

        if log_file is not None:
            file_path = Path(log_file)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(file_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            fh.setLevel(level)
            if json_logs:
                fh.setFormatter(_JSONFormatter())
            else:
                fh.setFormatter(
                    logging.Formatter(
                        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                        datefmt="%Y-%m-%dT%H:%M:%S%z",
                    )
                )
            self._logger.addHandler(fh)

    @classmethod
    def from_config(cls, component: str, config: Any) -> WardenLogger:
        """Build a logger from a :class:`~shared.config.WardenConfig`."""
        settings = config.global_settings
        return cls(
            component,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Operation scope
    # ------------------------------------------------------------------ #

    class _OperationContext:
        def __init__(self, parent: WardenLogger, operation: str) -> None:
            self._parent = parent
            self._operation = operation
            self._token: Token[str | None] | None = None

        def __enter__(self) -> WardenLogger:
            self._token = _OPERATION.set(self._operation)
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            if self._token is not None:
                _OPERATION.reset(self._token)
                self._token = None

    def operation(self, name: str) -> _OperationContext:
        """Bind ``operation=<name>`` to every record logged inside the block.

        The binding lives in a :class:`contextvars.ContextVar`, so overlapping
        blocks in different threads do not see each other's operation.
        """
        return self._OperationContext(self, name)

    @property
    def current_operation(self) -> str | None:
        """Operation bound in the calling context, if any."""
        return _OPERATION.get()

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _enrich(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        extra = kwargs.pop("extra", {}) or {}

        payload: dict[str, Any] = {}
        for key in list(kwargs):
            if key not in {"exc_info", "stack_info", "stacklevel"}:
                payload[key] = kwargs.pop(key)

        extra["component"] = self._component
        extra["operation"] = _OPERATION.get()
        if payload:
            extra["warden_extra"] = payload

        kwargs["extra"] = extra
        return kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(msg, *args, **self._enrich(kwargs))

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(msg, *args, **self._enrich(kwargs))

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(msg, *args, **self._enrich(kwargs))

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(msg, *args, **self._enrich(kwargs))

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at ERROR level with the active exception's traceback."""
        kwargs.setdefault("exc_info", True)
        self._logger.error(msg, *args, **self._enrich(kwargs))

    # ------------------------------------------------------------------ #
    #  Timing helper
    # ------------------------------------------------------------------ #

    class _TimingContext:
        def __init__(self, logger_inst: WardenLogger, label: str) -> None:
            self._logger = logger_inst
            self._label = label
            self._start: float = 0.0
            self._end: float | None = None

        def __enter__(self) -> WardenLogger._TimingContext:
            self._start = time.perf_counter()
            self._logger.debug("Started: %s", self._label)
            return self

        def __exit__(self, *exc: Any) -> None:
            self._end = time.perf_counter()
            self._logger.debug("Completed: %s (%.3f sec)", self._label, self.elapsed)

        @property
        def elapsed(self) -> float:
            """Seconds between entering and leaving (or now, while inside)."""
            end = self._end if self._end is not None else time.perf_counter()
            return end - self._start

    def timed(self, label: str) -> _TimingContext:
        """Context manager logging start, finish and elapsed seconds.

        Usage::

            with log.timed("batch hashing") as t:
                results = hasher.batch_hash(passwords)
            print(t.elapsed)
        """
        return self._TimingContext(self, label)

    @property
    def component(self) -> str:
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        """Direct access to the stdlib :class:`logging.Logger`."""
        return self._logger
