"""
Shared fixtures: recording collaborators and a manually driven clock.
"""
from dataclasses import dataclass, field

import pytest


class RecordingBackend:
    def __init__(self, fail: bool = False):
        self.calls = []
        self.fail = fail

    def _record(self, kind, request):
        if self.fail:
            raise ConnectionError("backend unavailable")
        self.calls.append((kind, request))

    def login(self, credentials):
        self._record("login", credentials)
        return None

    def forgot_password(self, request):
        self._record("forgot_password", request)

    def reset_password(self, request):
        self._record("reset_password", request)


class RecordingNavigator:
    def __init__(self):
        self.paths = []

    def navigate(self, path):
        self.paths.append(path)


@dataclass
class _Timer:
    due: float
    callback: object
    cancelled: bool = False
    fired: bool = False

    def cancel(self):
        self.cancelled = True


@dataclass
class ManualScheduler:
    now: float = 0.0
    timers: list = field(default_factory=list)

    def call_later(self, delay, callback):
        timer = _Timer(due=self.now + delay, callback=callback)
        self.timers.append(timer)
        return timer

    def advance(self, seconds):
        self.now += seconds
        for timer in list(self.timers):
            if not timer.cancelled and not timer.fired and timer.due <= self.now:
                timer.fired = True
                timer.callback()


@pytest.fixture
def backend():
    return RecordingBackend()


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def failing_backend():
    return RecordingBackend(fail=True)
