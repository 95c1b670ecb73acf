"""Runtime configuration for the countdown windows."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from focusbox.core.parsing import format_duration_token
from focusbox.core.urgency import CRITICAL_RATIO, WARNING_RATIO


@dataclass(frozen=True)
class WindowGeometry:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class AppConfig:
    """Defaults for the tick cadence, urgency thresholds and pre-filled input."""

    tick_interval_ms: int = 200
    warning_ratio: float = WARNING_RATIO
    critical_ratio: float = CRITICAL_RATIO
    adjust_steps: tuple[int, ...] = (-300, -60, 60, 300)
    default_project: str = "The Big One"
    default_task: str = "Piece of cake"
    default_duration: str = format_duration_token(25, "m")
    config_geometry: WindowGeometry = field(default_factory=lambda: WindowGeometry(100, 100, 400, 240))
    session_geometry: WindowGeometry = field(default_factory=lambda: WindowGeometry(100, 100, 400, 300))

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError("Tick interval must be positive")
        if not 0 < self.warning_ratio <= self.critical_ratio:
            raise ValueError("Expected 0 < warning ratio <= critical ratio")

    def with_overrides(
        self,
        project: str | None = None,
        task: str | None = None,
        duration: str | None = None,
        tick_interval_ms: int | None = None,
    ) -> "AppConfig":
        changes: dict[str, object] = {}
        if project is not None:
            changes["default_project"] = project
        if task is not None:
            changes["default_task"] = task
        if duration is not None:
            changes["default_duration"] = duration
        if tick_interval_ms is not None:
            changes["tick_interval_ms"] = tick_interval_ms
        return replace(self, **changes)
