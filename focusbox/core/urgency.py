from __future__ import annotations

import math
from enum import Enum


WARNING_RATIO = 0.7
CRITICAL_RATIO = 0.9


class UrgencyTier(str, Enum):
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


def classify(
    ratio: float,
    warning: float = WARNING_RATIO,
    critical: float = CRITICAL_RATIO,
) -> UrgencyTier:
    """Map the consumed fraction of a session to its urgency tier."""
    if not math.isfinite(ratio):
        return UrgencyTier.CRITICAL
    if ratio < warning:
        return UrgencyTier.NORMAL
    if ratio < critical:
        return UrgencyTier.WARNING
    return UrgencyTier.CRITICAL
