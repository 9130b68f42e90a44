"""Fluent builder for structured JSON log records."""

from loggerfy.builder import LogBuilder
from loggerfy.config import Config, load_config
from loggerfy.factory import Loggerfy
from loggerfy.file_store import JsonLinesRepository
from loggerfy.memory_store import InMemoryRepository
from loggerfy.models import LOG_LEVELS, NULL_ID, LogLevel, LogRecord
from loggerfy.repository import LogRepository, wait_for_saves

__all__ = [
    "Config",
    "InMemoryRepository",
    "JsonLinesRepository",
    "LOG_LEVELS",
    "LogBuilder",
    "LogLevel",
    "LogRecord",
    "LogRepository",
    "Loggerfy",
    "NULL_ID",
    "load_config",
    "wait_for_saves",
]

__version__ = "1.0.0"
