"""Test doubles shared by the unit tests."""

from pugview.host.backend import HostRuntime
from pugview.lifecycle import ReadySignal


class FakeHost(HostRuntime):
    """In-memory host runtime recording interception requests."""

    def __init__(self, ready: bool = True, error: Exception | None = None) -> None:
        self.ready = ReadySignal()
        if ready:
            self.ready.fire()
        self.error = error
        self.intercepted: list = []

    def is_ready(self) -> bool:
        return self.ready.is_set

    def when_ready(self, callback) -> None:
        self.ready.connect(callback)

    def intercept(self, scheme, handle, callback) -> None:
        self.intercepted.append((scheme, handle))
        callback(self.error)
