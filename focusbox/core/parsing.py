from __future__ import annotations

"""Free-form duration input such as ``25m``, ``90s``, ``1h`` or ``120``."""

import re

from focusbox.core.errors import InvalidFormat


UNIT_MULTIPLIERS = {
    "h": 3600,
    "m": 60,
    "s": 1,
}

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Durations are signed 32-bit second counts.
MAX_DURATION_SECONDS = 2**31 - 1


def parse_duration(token: str) -> int:
    """Convert a duration token to whole seconds.

    A trailing ``h``, ``m`` or ``s`` selects the unit; without one the token is
    read as seconds. Zero and negative values pass through unchanged.
    """
    if not token:
        raise InvalidFormat(token)

    last = token[-1]
    if last in UNIT_MULTIPLIERS:
        number, multiplier = token[:-1], UNIT_MULTIPLIERS[last]
    elif last.isascii() and last.isdigit():
        number, multiplier = token, 1
    else:
        raise InvalidFormat(token)

    if not _INTEGER_RE.fullmatch(number):
        raise InvalidFormat(token)
    try:
        seconds = int(number) * multiplier
    except ValueError as exc:
        raise InvalidFormat(token) from exc
    if abs(seconds) > MAX_DURATION_SECONDS:
        raise InvalidFormat(token)
    return seconds


def format_duration_token(value: int, unit: str = "s") -> str:
    if unit not in UNIT_MULTIPLIERS:
        raise ValueError(f"Unknown unit: {unit!r}")
    return f"{value}{unit}"
