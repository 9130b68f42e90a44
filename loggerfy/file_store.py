"""Async JSON-lines repository, one serialized record per line."""

import json
import logging
import os

import aiofiles

from loggerfy.models import LogRecord

logger = logging.getLogger(__name__)


class JsonLinesRepository:
    """Persists records to an append-only file using async I/O."""

    def __init__(self, path: str) -> None:
        self.path = path
        dir_path = os.path.dirname(path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)

    async def save(self, record: LogRecord) -> None:
        line = record.to_json() + "\n"
        async with aiofiles.open(self.path, mode="a", encoding="utf-8") as f:
            await f.write(line)

    async def _read_records(self) -> list[LogRecord]:
        if not os.path.exists(self.path):
            return []

        records = []
        async with aiofiles.open(self.path, mode="r", encoding="utf-8") as f:
            line_num = 0
            async for line in f:
                line_num += 1
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning("Skipping malformed line %d in %s", line_num, self.path)
                    continue
                if not isinstance(data, dict):
                    logger.warning("Skipping non-object line %d in %s", line_num, self.path)
                    continue
                records.append(LogRecord.from_dict(data))
        return records

    async def get_by_id(self, record_id) -> LogRecord | None:
        record_id = str(record_id)
        found = None
        for record in await self._read_records():
            if record.id == record_id:
                found = record
        return found

    async def get_all(self, criteria: dict | None = None) -> list[LogRecord]:
        records = await self._read_records()
        if not criteria:
            return records
        return [r for r in records if r.matches(criteria)]
