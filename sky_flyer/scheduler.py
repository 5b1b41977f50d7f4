"""Frame scheduling: how the next tick gets armed."""
from __future__ import annotations

from typing import Callable, Protocol

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    """Arranges one future call of a callback with the frame timestamp (ms)."""

    def request(self, callback: FrameCallback) -> int: ...

    def cancel(self, handle: int) -> None: ...


class ManualScheduler:
    """Runs requested callbacks when the host calls ``advance``.

    Callbacks requested while ``advance`` is running wait for the next
    call, so each advance is exactly one frame.
    """

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._next_handle = 1

    def request(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def advance(self, now_ms: float) -> int:
        """Run every callback pending before this call. Returns how many ran."""
        due = self._pending
        self._pending = {}
        for callback in due.values():
            callback(now_ms)
        return len(due)
