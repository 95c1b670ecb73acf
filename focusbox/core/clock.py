from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SessionClock:
    """Splits elapsed time between running and paused accumulators.

    Every ``advance`` credits the full delta since the previous sample to
    exactly one accumulator, picked by ``is_paused`` at that moment, so
    ``active_elapsed + paused_elapsed`` always equals the time sampled since
    the clock was started.
    """

    last_sample_instant: float
    active_elapsed: float = 0.0
    paused_elapsed: float = 0.0
    is_paused: bool = False

    @classmethod
    def started(cls, now: float) -> "SessionClock":
        return cls(last_sample_instant=now)

    def advance(self, now: float) -> float:
        # A clock that steps backwards must not shrink either accumulator.
        delta = max(0.0, now - self.last_sample_instant)
        self.last_sample_instant = now
        if self.is_paused:
            self.paused_elapsed += delta
        else:
            self.active_elapsed += delta
        return delta

    @property
    def total_elapsed(self) -> float:
        return self.active_elapsed + self.paused_elapsed
