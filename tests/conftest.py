"""
Shared fixtures: in-memory gateways for exercising the item store.
"""

import copy
from typing import Any, Optional

import pytest

from config.settings import get_settings
from services.storage.base import StorageError, StorageGateway, StorageNotReady


class RecordingStorage(StorageGateway):
    """Dict-backed gateway that remembers every write."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self.values: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self.reads: list[str] = []
        self.writes: list[tuple[str, Any]] = []

    @property
    def backend_name(self) -> str:
        return "recording"

    async def get(self, key: str) -> Optional[Any]:
        self.reads.append(key)
        return copy.deepcopy(self.values.get(key))

    async def set(self, key: str, value: Any) -> None:
        self.writes.append((key, copy.deepcopy(value)))
        self.values[key] = copy.deepcopy(value)


class FailingStorage(StorageGateway):
    """Gateway whose reads and writes always fail."""

    def __init__(self):
        self.attempted_writes = 0

    @property
    def backend_name(self) -> str:
        return "failing"

    async def get(self, key: str) -> Optional[Any]:
        raise StorageError("storage unavailable")

    async def set(self, key: str, value: Any) -> None:
        self.attempted_writes += 1
        raise StorageError("quota exceeded")


class DelayedStorage(RecordingStorage):
    """Recording gateway that is not ready until told so."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        super().__init__(initial)
        self.ready = False

    async def get(self, key: str) -> Optional[Any]:
        if not self.ready:
            raise StorageNotReady("not answered yet")
        return await super().get(key)


class FakeLocalStorage:
    """
    Stand-in for streamlit_local_storage.LocalStorage.

    Each instance sees the browser values as they were when it was
    created, like the component does within one script run.
    """

    def __init__(self, browser: dict[str, Any], fail: bool = False):
        self._values = dict(browser)
        self._browser = browser
        self._fail = fail
        self.widget_keys: list[str] = []

    def getItem(self, itemKey):
        if self._fail:
            raise RuntimeError("component crashed")
        return self._values.get(itemKey)

    def setItem(self, itemKey, itemValue, key="set"):
        if self._fail:
            raise RuntimeError("component crashed")
        self.widget_keys.append(key)
        self._browser[itemKey] = itemValue


class FakeBrowser:
    """The viewer's localStorage plus every component rendered against it."""

    def __init__(self):
        self.values: dict[str, Any] = {}
        self.components: list[FakeLocalStorage] = []
        self.fail = False

    def local_storage(self, *args, **kwargs) -> FakeLocalStorage:
        component = FakeLocalStorage(self.values, fail=self.fail)
        self.components.append(component)
        return component


@pytest.fixture
def browser(monkeypatch):
    """Replace the localStorage component with an in-memory browser."""
    fake = FakeBrowser()
    monkeypatch.setattr("services.storage.browser.LocalStorage", fake.local_storage)
    return fake


@pytest.fixture
def storage():
    return RecordingStorage()


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def errors():
    return []


@pytest.fixture
def memory_settings(monkeypatch):
    """Point get_settings() at the in-process storage backend."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def browser_settings(monkeypatch):
    """Point get_settings() at the browser storage backend."""
    monkeypatch.setenv("STORAGE_BACKEND", "browser")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
