"""Structured logging for registry components."""
from .registry_logger import (
    LogLevel,
    LogContext,
    LogEntry,
    JSONFormatter,
    HumanFormatter,
    RegistryLogger,
    TimedOperation,
    create_registry_logger,
)

__all__ = [
    "LogLevel",
    "LogContext",
    "LogEntry",
    "JSONFormatter",
    "HumanFormatter",
    "RegistryLogger",
    "TimedOperation",
    "create_registry_logger",
]
