import collections
import threading

from loggerfy.models import LogRecord


class InMemoryRepository:
    """Thread-safe in-memory record storage backed by a bounded deque."""

    def __init__(self, max_size=1000):
        self._records = collections.deque(maxlen=max_size)
        self._lock = threading.Lock()
        self._total_count = 0

    def save(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)
            self._total_count += 1

    def get_by_id(self, record_id) -> LogRecord | None:
        """Return the most recently saved record with this id, or None."""
        record_id = str(record_id)
        with self._lock:
            for record in reversed(self._records):
                if record.id == record_id:
                    return record
        return None

    def get_all(self, criteria: dict | None = None) -> list[LogRecord]:
        """Return held records, oldest first, that match every criteria key."""
        with self._lock:
            records = list(self._records)
        if not criteria:
            return records
        return [r for r in records if r.matches(criteria)]

    @property
    def total_count(self):
        """Total number of records ever saved."""
        return self._total_count

    @property
    def current_size(self):
        return len(self._records)

    def clear(self):
        with self._lock:
            self._records.clear()
            self._total_count = 0
