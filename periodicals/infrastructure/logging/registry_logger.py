"""
Structured logging for the periodical registry.

Provides:
- JSON output for machine consumption
- Human-readable output for the console
- Context tracking (run_id, container, operation)
- Operation timing

Only the wiring and CLI layers log. Containers and records stay silent.
"""
import json
import logging
import sys
from dataclasses import asdict, dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class LogLevel(Enum):
    """Log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Parse a level name, case-insensitively."""
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Unknown log level: {value}") from None


@dataclass(frozen=True)
class LogContext:
    """Context attached to every record logged with it."""
    run_id: Optional[str] = None
    container: Optional[str] = None
    operation: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_operation(self, operation: str) -> "LogContext":
        """Return new context with operation set."""
        return replace(self, operation=operation, extra=dict(self.extra))

    def with_container(self, container: str) -> "LogContext":
        """Return new context scoped to a container."""
        return replace(self, container=container, extra=dict(self.extra))

    def with_extra(self, **kwargs) -> "LogContext":
        """Return new context with additional data."""
        merged = dict(self.extra)
        merged.update(kwargs)
        return replace(self, extra=merged)


@dataclass
class LogEntry:
    """Structured log entry."""
    timestamp: str
    level: str
    message: str
    component: Optional[str] = None
    run_id: Optional[str] = None
    container: Optional[str] = None
    operation: Optional[str] = None
    duration_ms: Optional[float] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        data = {k: v for k, v in asdict(self).items() if v is not None}
        if not data.get("extra"):
            data.pop("extra", None)
        return json.dumps(data, default=str, ensure_ascii=False)

    def to_human(self) -> str:
        parts = [f"[{self.timestamp}]", f"[{self.level}]"]
        if self.component:
            parts.append(f"[{self.component}]")
        if self.container:
            parts.append(f"<{self.container}>")
        parts.append(self.message)
        if self.duration_ms is not None:
            parts.append(f"({self.duration_ms:.2f}ms)")
        if self.error:
            parts.append(f"ERROR: {self.error}")
        return " ".join(parts)


def _entry_from_record(record: logging.LogRecord, timestamp: str) -> LogEntry:
    exc_type, exc_value = (record.exc_info or (None, None, None))[:2]
    return LogEntry(
        timestamp=timestamp,
        level=record.levelname,
        message=record.getMessage(),
        component=getattr(record, "component", None),
        run_id=getattr(record, "run_id", None),
        container=getattr(record, "container", None),
        operation=getattr(record, "operation", None),
        duration_ms=getattr(record, "duration_ms", None),
        error=str(exc_value) if exc_value is not None else None,
        error_type=exc_type.__name__ if exc_type is not None else None,
        extra=getattr(record, "extra", None) or {},
    )


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        return _entry_from_record(record, timestamp).to_json()


class HumanFormatter(logging.Formatter):
    """Short console format."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        return _entry_from_record(record, timestamp).to_human()


class RegistryLogger:
    """
    Structured logger for registry components.

    Usage:
        logger = RegistryLogger("wiring")

        ctx = LogContext(run_id="abc123", container="journals")
        logger.info("Loaded sample data", ctx, count=5)

        with logger.timed_operation("load_sample_data", ctx):
            load_sample_data(registry)
    """

    def __init__(
        self,
        component: str,
        level: LogLevel = LogLevel.INFO,
        json_output: bool = False,
        log_file: Optional[Path] = None,
        stream=None,
    ):
        self._component = component
        self._logger = logging.getLogger(f"periodicals.{component}")
        self._logger.setLevel(getattr(logging, level.value))
        self._logger.propagate = False

        for handler in self._logger.handlers:
            handler.close()
        self._logger.handlers.clear()

        console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        console_handler.setLevel(getattr(logging, level.value))
        console_handler.setFormatter(JSONFormatter() if json_output else HumanFormatter())
        self._logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(JSONFormatter())
            self._logger.addHandler(file_handler)

    @property
    def component(self) -> str:
        return self._component

    @property
    def level(self) -> int:
        return self._logger.level

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[LogContext] = None,
        duration_ms: Optional[float] = None,
        exc_info=False,
        **kwargs,
    ) -> None:
        extra = {
            "component": self._component,
            "duration_ms": duration_ms,
            "extra": dict(kwargs),
        }
        if context:
            extra["run_id"] = context.run_id
            extra["container"] = context.container
            extra["operation"] = context.operation
            extra["extra"].update(context.extra)

        self._logger.log(level, message, extra=extra, exc_info=exc_info)

    def debug(self, message: str, context: Optional[LogContext] = None, **kwargs) -> None:
        self._log(logging.DEBUG, message, context, **kwargs)

    def info(self, message: str, context: Optional[LogContext] = None, **kwargs) -> None:
        self._log(logging.INFO, message, context, **kwargs)

    def warning(self, message: str, context: Optional[LogContext] = None, **kwargs) -> None:
        self._log(logging.WARNING, message, context, **kwargs)

    def error(
        self,
        message: str,
        context: Optional[LogContext] = None,
        exc_info=True,
        **kwargs,
    ) -> None:
        self._log(logging.ERROR, message, context, exc_info=exc_info, **kwargs)

    def timed_operation(
        self,
        operation: str,
        context: Optional[LogContext] = None,
    ) -> "TimedOperation":
        """Context manager for timing operations."""
        return TimedOperation(self, operation, context)


class TimedOperation:
    """Logs start, completion and duration of a block. Never suppresses errors."""

    def __init__(
        self,
        logger: RegistryLogger,
        operation: str,
        context: Optional[LogContext] = None,
    ):
        self._logger = logger
        self._operation = operation
        self._context = context.with_operation(operation) if context else LogContext(operation=operation)
        self._start_time: Optional[datetime] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self):
        self._start_time = datetime.now(timezone.utc)
        self._logger.debug(f"Starting {self._operation}", self._context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration_ms = (datetime.now(timezone.utc) - self._start_time).total_seconds() * 1000

        if exc_type:
            self._logger.error(
                f"Failed {self._operation}",
                self._context,
                exc_info=(exc_type, exc_val, exc_tb),
                duration_ms=self.duration_ms,
            )
        else:
            self._logger.info(
                f"Completed {self._operation}",
                self._context,
                duration_ms=self.duration_ms,
            )

        return False


def create_registry_logger(
    component: str,
    level: str = "INFO",
    json_output: bool = False,
    log_dir: Optional[str] = None,
    stream=None,
) -> RegistryLogger:
    """Factory function to create a configured logger."""
    log_file = None
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file = log_path / f"registry_{component}.log"

    return RegistryLogger(
        component=component,
        level=LogLevel.parse(level),
        json_output=json_output,
        log_file=log_file,
        stream=stream,
    )
