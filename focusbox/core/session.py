from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from focusbox.core.clock import SessionClock
from focusbox.core.errors import DurationTooLong, NonPositiveDuration
from focusbox.core.formatting import format_duration
from focusbox.core.parsing import MAX_DURATION_SECONDS
from focusbox.core.urgency import CRITICAL_RATIO, WARNING_RATIO, UrgencyTier, classify


logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


@dataclass(frozen=True)
class TaskDefinition:
    project: str
    description: str
    duration_seconds: int


@dataclass(frozen=True)
class SessionSnapshot:
    state: SessionState
    label_text: str
    urgency: UrgencyTier
    distraction_count: int
    is_paused: bool
    remaining_seconds: float
    active_elapsed: float
    paused_elapsed: float
    target_seconds: float
    project: str = ""
    description: str = ""


def build_label(is_paused: bool, paused_elapsed: float, remaining: float) -> str:
    if is_paused:
        return f"Paused: {format_duration(paused_elapsed)} / -{format_duration(remaining)}"
    return f"-{format_duration(remaining)}"


class SessionController:
    """Countdown state machine for one task at a time, detached from any UI."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        warning_ratio: float = WARNING_RATIO,
        critical_ratio: float = CRITICAL_RATIO,
    ) -> None:
        self._clock = clock
        self._warning_ratio = warning_ratio
        self._critical_ratio = critical_ratio
        self._state = SessionState.IDLE
        self._task: TaskDefinition | None = None
        self._session_clock: SessionClock | None = None
        self._target_seconds = 0.0
        self._distraction_count = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def task(self) -> TaskDefinition | None:
        return self._task

    @property
    def is_alive(self) -> bool:
        return self._state in {SessionState.RUNNING, SessionState.PAUSED}

    @property
    def target_seconds(self) -> float:
        return self._target_seconds

    @property
    def active_elapsed(self) -> float:
        return self._session_clock.active_elapsed if self._session_clock else 0.0

    @property
    def paused_elapsed(self) -> float:
        return self._session_clock.paused_elapsed if self._session_clock else 0.0

    @property
    def is_paused(self) -> bool:
        return self._session_clock.is_paused if self._session_clock else False

    @property
    def distraction_count(self) -> int:
        return self._distraction_count

    @property
    def last_sample_instant(self) -> float | None:
        return self._session_clock.last_sample_instant if self._session_clock else None

    def start(self, task: TaskDefinition, now: float | None = None) -> SessionSnapshot:
        # Validate everything before touching the running session.
        if task.duration_seconds <= 0:
            raise NonPositiveDuration(task.duration_seconds)
        if task.duration_seconds > MAX_DURATION_SECONDS:
            raise DurationTooLong(task.duration_seconds, MAX_DURATION_SECONDS)
        target = float(task.duration_seconds)
        if now is None:
            now = self._clock()
        if self.is_alive:
            logger.info("Replacing unfinished session")
        self._task = task
        self._session_clock = SessionClock.started(now)
        self._target_seconds = target
        self._distraction_count = 0
        self._state = SessionState.RUNNING
        logger.info(
            "Session started: project=%r task=%r duration=%s",
            task.project,
            task.description,
            format_duration(self._target_seconds),
        )
        return self.snapshot()

    def tick(self, now: float | None = None) -> SessionSnapshot:
        if not self.is_alive or self._session_clock is None:
            return self.snapshot()
        if now is None:
            now = self._clock()

        before = self._tier()
        self._session_clock.advance(now)
        if self._session_clock.active_elapsed >= self._target_seconds:
            self._state = SessionState.EXPIRED
            logger.info(
                "Session expired: active=%s paused=%s distractions=%d",
                format_duration(self._session_clock.active_elapsed),
                format_duration(self._session_clock.paused_elapsed),
                self._distraction_count,
            )
            return self.snapshot()

        after = self._tier()
        if after != before:
            logger.debug("Urgency changed: %s -> %s", before.value, after.value)
        return self.snapshot()

    def toggle_pause(self) -> SessionSnapshot:
        if not self.is_alive or self._session_clock is None:
            return self.snapshot()
        self._session_clock.is_paused = not self._session_clock.is_paused
        self._state = SessionState.PAUSED if self._session_clock.is_paused else SessionState.RUNNING
        return self.snapshot()

    def adjust_duration(self, delta_seconds: float) -> SessionSnapshot:
        if not self.is_alive:
            return self.snapshot()
        new_target = self._target_seconds + delta_seconds
        if new_target > 0:
            self._target_seconds = new_target
        return self.snapshot()

    def record_distraction(self) -> SessionSnapshot:
        if self.is_alive:
            self._distraction_count += 1
        return self.snapshot()

    def is_expired(self, visible: bool = True) -> bool:
        if not self.is_alive or self._session_clock is None:
            return True
        if self._session_clock.active_elapsed >= self._target_seconds:
            return True
        return not visible

    def finish(self) -> SessionSnapshot:
        """Close the current session; later intents no-op until the next start."""
        final = self.snapshot()
        if self._state != SessionState.IDLE:
            logger.info(
                "Session finished: active=%s paused=%s distractions=%d",
                format_duration(final.active_elapsed),
                format_duration(final.paused_elapsed),
                final.distraction_count,
            )
        self._state = SessionState.IDLE
        return final

    def snapshot(self) -> SessionSnapshot:
        """Display state for the current fields, without sampling the clock."""
        active = self.active_elapsed
        paused = self.paused_elapsed
        remaining = max(self._target_seconds - active, 0.0)
        return SessionSnapshot(
            state=self._state,
            label_text=build_label(self.is_paused, paused, remaining),
            urgency=self._tier(),
            distraction_count=self._distraction_count,
            is_paused=self.is_paused,
            remaining_seconds=remaining,
            active_elapsed=active,
            paused_elapsed=paused,
            target_seconds=self._target_seconds,
            project=self._task.project if self._task else "",
            description=self._task.description if self._task else "",
        )

    def _tier(self) -> UrgencyTier:
        if self._target_seconds <= 0:
            return UrgencyTier.NORMAL
        ratio = self.active_elapsed / self._target_seconds
        return classify(ratio, self._warning_ratio, self._critical_ratio)
