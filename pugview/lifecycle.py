# pugview/lifecycle.py
from typing import Callable, List

class ReadySignal:
    """One-shot signal: subscribers run exactly once, when it first fires.

    Subscribing after the signal fired runs the callback immediately.
    """

    def __init__(self):
        self._callbacks: List[Callable[[], None]] = []
        self._fired = False

    @property
    def is_set(self) -> bool:
        return self._fired

    def connect(self, callback: Callable[[], None]) -> None:
        if self._fired:
            callback()
            return
        self._callbacks.append(callback)

    def fire(self) -> None:
        if self._fired:
            return
        self._fired = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

# Fired by PugViewApp once the QApplication exists
application_ready = ReadySignal()
