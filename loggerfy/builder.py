"""Fluent log record builder."""

import logging
import sys
import uuid

from loggerfy.config import load_config
from loggerfy.models import NULL_ID, LogRecord, generate_id, utc_timestamp
from loggerfy.repository import dispatch_save

logger = logging.getLogger(__name__)


class LogBuilder:
    """Accumulates the fields of one record at a time.

    Setters return the builder so calls can be chained. ``get_log`` and a
    successful ``write`` both clear the in-flight fields, leaving the builder
    ready for the next record. Not safe for concurrent use.
    """

    def __init__(self, level: str, repository=None):
        config = load_config()
        self._level = level
        self._repository = repository
        self._service = config.service
        self._environment = config.environment
        self._reset()

    @property
    def id(self) -> str:
        return self._id

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def detail(self) -> str:
        return self._detail

    @property
    def metadata(self) -> dict:
        return self._metadata

    @property
    def level(self) -> str:
        return self._level

    @property
    def service(self) -> str:
        return self._service

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def repository(self):
        return self._repository

    def set_code(self, code: str) -> "LogBuilder":
        self._code = code
        return self

    def set_message(self, message: str) -> "LogBuilder":
        self._message = message
        return self

    def set_detail(self, detail: str) -> "LogBuilder":
        self._detail = detail
        return self

    def set_metadata(self, metadata: dict) -> "LogBuilder":
        """Replace the payload mapping. Previous contents are discarded."""
        self._metadata = metadata
        return self

    def _build_record(self) -> LogRecord:
        return LogRecord(
            timestamp=utc_timestamp(),
            id=self._id,
            code=self._code,
            message=self._message,
            detail=self._detail,
            payload=dict(self._metadata),
            level=self._level,
            severity=self._level,
            service=self._service,
            environment=self._environment,
        )

    def get_log(self) -> str:
        """Render the current fields as JSON and reset. No output, no persistence."""
        self._id = generate_id()
        log = self._build_record().to_json()
        self._reset()
        return log

    def write(self, custom_id: str | uuid.UUID | None = None) -> None:
        """Emit the record to stdout and hand it to the repository, if any.

        Does nothing, and keeps the partial fields, when code, message or
        detail is empty.
        """
        if not self._code or not self._message or not self._detail:
            logger.debug("Record suppressed: code, message and detail are required")
            return

        self._id = str(custom_id) if custom_id is not None else generate_id()
        record = self._build_record()

        sys.stdout.write(record.to_json() + "\n")
        sys.stdout.flush()

        if self._repository is not None:
            dispatch_save(self._repository, record)
        self._reset()

    def _reset(self):
        self._id = NULL_ID
        self._code = ""
        self._message = ""
        self._detail = ""
        self._metadata = {}
