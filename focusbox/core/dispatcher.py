from __future__ import annotations

"""Single-consumer event loop that owns every mutation of the session."""

import logging
from collections import deque
from typing import Any, Callable, Protocol

from focusbox.core.errors import DurationTooLong, InvalidFormat, NonPositiveDuration
from focusbox.core.events import (
    DistractionRequested,
    DurationAdjustRequested,
    Intent,
    NewTaskRequested,
    PauseToggleRequested,
    TickElapsed,
)
from focusbox.core.session import SessionController, SessionSnapshot, TaskDefinition


logger = logging.getLogger(__name__)


class ConfigurationView(Protocol):
    def read_task(self) -> TaskDefinition: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def show_error(self, message: str) -> None: ...


class SessionView(Protocol):
    def present(self, task: TaskDefinition) -> None: ...

    def dismiss(self) -> None: ...

    def display(self, snapshot: SessionSnapshot) -> None: ...

    def is_visible(self) -> bool: ...


class TickSource(Protocol):
    def arm(self, interval_ms: int, callback: Callable[[], None]) -> Any: ...

    def disarm(self, handle: Any) -> None: ...


class EventDispatcher:
    """Applies intents one at a time, in arrival order.

    Intents posted while another is being handled (for example by a view
    callback) are queued behind it instead of running re-entrantly.
    Views are attached after construction so they can be built with
    ``dispatcher.post`` as their only way to raise intents.
    """

    def __init__(
        self,
        controller: SessionController,
        tick_source: TickSource,
        tick_interval_ms: int = 200,
    ) -> None:
        self.controller = controller
        self.tick_source = tick_source
        self.tick_interval_ms = tick_interval_ms
        self._configuration: ConfigurationView | None = None
        self._presentation: SessionView | None = None
        self._queue: deque[Intent] = deque()
        self._draining = False
        self._tick_handle: Any = None
        self._handlers: dict[type, Callable[[Any], None]] = {
            NewTaskRequested: self._on_new_task,
            TickElapsed: self._on_tick,
            PauseToggleRequested: self._on_toggle_pause,
            DistractionRequested: self._on_distraction,
            DurationAdjustRequested: self._on_adjust,
        }

    def attach(self, configuration: ConfigurationView, presentation: SessionView) -> None:
        self._configuration = configuration
        self._presentation = presentation

    @property
    def configuration(self) -> ConfigurationView:
        if self._configuration is None:
            raise RuntimeError("Dispatcher has no configuration view attached")
        return self._configuration

    @property
    def presentation(self) -> SessionView:
        if self._presentation is None:
            raise RuntimeError("Dispatcher has no session view attached")
        return self._presentation

    @property
    def is_armed(self) -> bool:
        return self._tick_handle is not None

    @property
    def pending(self) -> int:
        return len(self._queue)

    def post(self, intent: Intent) -> None:
        self._queue.append(intent)
        if self._draining:
            return
        self._draining = True
        try:
            while self._queue:
                event = self._queue.popleft()
                self._handlers[type(event)](event)
        finally:
            self._draining = False

    def _on_new_task(self, _event: NewTaskRequested) -> None:
        try:
            task = self.configuration.read_task()
            snapshot = self.controller.start(task)
        except (InvalidFormat, NonPositiveDuration, DurationTooLong) as exc:
            logger.warning("Task not started: %s", exc)
            self.configuration.show_error(str(exc))
            return

        self._disarm()
        self.configuration.hide()
        self._tick_handle = self.tick_source.arm(self.tick_interval_ms, self._post_tick)
        self.presentation.present(task)
        self.presentation.display(snapshot)

    def _on_tick(self, _event: TickElapsed) -> None:
        # Ticks already queued when the session ended are stale.
        if self._tick_handle is None:
            return
        if self.controller.is_expired(self.presentation.is_visible()):
            self._finish()
            return
        snapshot = self.controller.tick()
        if self.controller.is_expired():
            self._finish()
            return
        self.presentation.display(snapshot)

    def _on_toggle_pause(self, _event: PauseToggleRequested) -> None:
        self._render(self.controller.toggle_pause())

    def _on_distraction(self, _event: DistractionRequested) -> None:
        self._render(self.controller.record_distraction())

    def _on_adjust(self, event: DurationAdjustRequested) -> None:
        self._render(self.controller.adjust_duration(event.delta_seconds))

    def _render(self, snapshot: SessionSnapshot) -> None:
        if self.controller.is_alive:
            self.presentation.display(snapshot)

    def _post_tick(self) -> None:
        self.post(TickElapsed())

    def _finish(self) -> None:
        self.controller.finish()
        self._disarm()
        self.presentation.dismiss()
        self.configuration.show()

    def _disarm(self) -> None:
        if self._tick_handle is not None:
            self.tick_source.disarm(self._tick_handle)
            self._tick_handle = None
