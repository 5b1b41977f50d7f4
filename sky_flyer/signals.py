"""Queued pub/sub bus carrying audio cues and frame snapshots to collaborators."""
from __future__ import annotations

from typing import Any, Callable

SCORE = "score"
BOOST = "boost"
CRASH = "crash"
FRAME = "frame"

KNOWN_SIGNALS = frozenset({SCORE, BOOST, CRASH, FRAME})

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Signals are queued while a tick runs and delivered on ``flush``.

    Delivery follows publication order; for one signal, handlers run in
    subscription order. Anything published by a handler waits for the
    next flush.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {name: [] for name in KNOWN_SIGNALS}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def _check(self, signal_name: str) -> None:
        if signal_name not in KNOWN_SIGNALS:
            raise ValueError(f"Unknown signal {signal_name!r}")

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._check(signal_name)
        self._handlers[signal_name].append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> bool:
        """Remove one registration. Returns False if it was not subscribed."""
        handlers = self._handlers.get(signal_name, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, signal_name: str, **data: Any) -> None:
        self._check(signal_name)
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Deliver everything queued so far. Returns the number of signals delivered."""
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            for handler in tuple(self._handlers[signal_name]):
                handler(signal_name, data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()
