from __future__ import annotations


def format_duration(seconds: float) -> str:
    """Render a non-negative span as ``MM:SS``, or ``HH:MM:SS`` from one hour up."""
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
