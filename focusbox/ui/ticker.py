from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QObject, QTimer


class QtTickSource:
    """Periodic tick source backed by one ``QTimer`` per armed session."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._timers: list[QTimer] = []

    def arm(self, interval_ms: int, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self._parent)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        self._timers.append(timer)
        return timer

    def disarm(self, handle: QTimer) -> None:
        if handle not in self._timers:
            raise RuntimeError("Tick source handle is not armed")
        self._timers.remove(handle)
        handle.stop()
        handle.timeout.disconnect()
        handle.deleteLater()
