import pytest

from loggerfy.factory import Loggerfy


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host configuration out of builder construction."""
    for var in ("SERVICE_NAME", "APP_ENV", "LOGGERFY_CONFIG"):
        monkeypatch.delenv(var, raising=False)


class RecordingRepository:
    """Synchronous repository that remembers every saved record."""

    def __init__(self):
        self.saved = []

    def save(self, record):
        self.saved.append(record)


@pytest.fixture
def repository():
    return RecordingRepository()


@pytest.fixture
def logger():
    return Loggerfy().info()
