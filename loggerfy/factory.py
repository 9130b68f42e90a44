"""Entry point handing out level-bound builders."""

from loggerfy.builder import LogBuilder
from loggerfy.models import LogLevel


class Loggerfy:
    """Creates a fresh LogBuilder per call, sharing only the repository.

    Usage::

        log = Loggerfy()
        log.error() \\
            .set_code("AUTH_001") \\
            .set_message("User authentication failed") \\
            .set_detail("Invalid credentials provided") \\
            .set_metadata({"userId": 123, "ip": "192.168.1.10"}) \\
            .write()
    """

    def __init__(self, repository=None):
        self._repository = repository

    @property
    def repository(self):
        return self._repository

    def info(self) -> LogBuilder:
        return LogBuilder(LogLevel.INFO, self._repository)

    def warn(self) -> LogBuilder:
        return LogBuilder(LogLevel.WARNING, self._repository)

    def error(self) -> LogBuilder:
        return LogBuilder(LogLevel.ERROR, self._repository)
