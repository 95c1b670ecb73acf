from __future__ import annotations


class InvalidFormat(ValueError):
    """Duration text could not be turned into seconds."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid duration: {token!r} (use e.g. 90, 90s, 25m or 1h)")
        self.token = token


class NonPositiveDuration(ValueError):
    """A session cannot run for zero or negative seconds."""

    def __init__(self, seconds: float) -> None:
        super().__init__(f"Duration must be positive, got {seconds} seconds")
        self.seconds = seconds


class DurationTooLong(ValueError):
    """A session longer than the largest supported duration."""

    def __init__(self, seconds: int, limit: int) -> None:
        super().__init__(f"Duration must be at most {limit} seconds")
        self.seconds = seconds
        self.limit = limit
