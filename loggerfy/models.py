"""Log record data model, severity levels, and id/timestamp helpers."""

import json
import uuid
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone


class LogLevel:
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


LOG_LEVELS = (LogLevel.INFO, LogLevel.WARNING, LogLevel.ERROR)

NULL_ID = "00000000-0000-0000-0000-000000000000"


def generate_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2025-03-06T12:34:56.789Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class LogRecord:
    """A finished log entry. Field order is the serialized key order."""

    timestamp: str
    id: str
    code: str = ""
    message: str = ""
    detail: str = ""
    payload: dict = field(default_factory=dict)
    level: str = LogLevel.INFO
    severity: str = LogLevel.INFO
    service: str = ""
    environment: str = ""

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_json(self) -> str:
        text = json.dumps(
            self.to_dict(), separators=(",", ":"), ensure_ascii=False, default=str
        )
        # Lone surrogates (e.g. from os.fsdecode) become \uXXXX escapes.
        return text.encode("utf-8", "backslashreplace").decode("utf-8")

    @classmethod
    def from_dict(cls, data: dict) -> "LogRecord":
        level = str(data.get("level", LogLevel.INFO))
        payload = data.get("payload")
        return cls(
            timestamp=str(data.get("timestamp", "")),
            id=str(data.get("id", NULL_ID)),
            code=str(data.get("code", "")),
            message=str(data.get("message", "")),
            detail=str(data.get("detail", "")),
            payload=payload if isinstance(payload, dict) else {},
            level=level,
            severity=str(data.get("severity", level)),
            service=str(data.get("service", "")),
            environment=str(data.get("environment", "")),
        )

    def matches(self, criteria: dict) -> bool:
        """True if every key in criteria equals the attribute of the same name."""
        names = {f.name for f in fields(self)}
        for key, value in criteria.items():
            if key not in names or getattr(self, key) != value:
                return False
        return True
