"""Frame scheduling: "run this once before the next repaint" with cancel-by-token."""

import itertools
from typing import Callable, Protocol

FrameCallback = Callable[[], None]


class Scheduler(Protocol):
    def schedule(self, callback: FrameCallback) -> int: ...

    def cancel(self, token: int) -> None: ...


class FrameScheduler:
    """Holds at most one pending frame request.

    The host loop calls run_pending() once per display refresh. A new
    schedule() supersedes whatever was pending; cancel() only drops the
    request if the token is still the current one.
    """

    def __init__(self):
        self._tokens = itertools.count(1)
        self._token: int | None = None
        self._callback: FrameCallback | None = None

    @property
    def pending(self) -> bool:
        return self._callback is not None

    def schedule(self, callback: FrameCallback) -> int:
        self._token = next(self._tokens)
        self._callback = callback
        return self._token

    def cancel(self, token: int) -> None:
        if token == self._token:
            self._token = None
            self._callback = None

    def run_pending(self) -> bool:
        """Fire the pending callback, if any. Returns True if one ran."""
        callback = self._callback
        if callback is None:
            return False
        self._token = None
        self._callback = None
        callback()
        return True
