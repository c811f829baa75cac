"""Shared fakes: in-memory key-value store, Tk-style scheduler, clipboard."""

import pytest

from prizebonds.errors import ClipboardUnavailableError, PersistenceError


class MemoryStore:
    def __init__(self, data=None, fail_writes=False):
        self.data = dict(data or {})
        self.fail_writes = fail_writes
        self.writes = 0

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        if self.fail_writes:
            raise PersistenceError("disk full")
        self.writes += 1
        self.data[key] = value


class FakeScheduler:
    """Mimics Tk's after/after_cancel; fire() runs pending callbacks by hand."""

    def __init__(self):
        self._next = 0
        self.pending = {}
        self.cancelled = []

    def after(self, ms, func):
        self._next += 1
        handle = f"after#{self._next}"
        self.pending[handle] = (ms, func)
        return handle

    def after_cancel(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire(self, handle):
        _, func = self.pending.pop(handle)
        func()

    def fire_all(self):
        for handle in list(self.pending):
            self.fire(handle)


class FakeClipboard:
    def __init__(self, fail=False):
        self.fail = fail
        self.text = None

    def copy(self, text):
        if self.fail:
            raise ClipboardUnavailableError("no clipboard")
        self.text = text


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clipboard():
    return FakeClipboard()
