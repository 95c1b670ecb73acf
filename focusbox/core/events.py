from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NewTaskRequested:
    pass


@dataclass(frozen=True)
class TickElapsed:
    pass


@dataclass(frozen=True)
class PauseToggleRequested:
    pass


@dataclass(frozen=True)
class DistractionRequested:
    pass


@dataclass(frozen=True)
class DurationAdjustRequested:
    delta_seconds: float


Intent = Union[
    NewTaskRequested,
    TickElapsed,
    PauseToggleRequested,
    DistractionRequested,
    DurationAdjustRequested,
]
