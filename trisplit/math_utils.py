"""Numeric helpers shared by the distributor, the strategies and the state."""

from __future__ import annotations

import sys
from typing import Optional

ZERO = 0.0

# Finite stand-in for "no upper bound"; ``math.inf`` is rejected as a size.
UNBOUNDED = sys.float_info.max

# Relative slack when checking that the sides fit; distributed sizes carry
# floating point round-off.
SIZE_TOLERANCE = 1e-9


def clamp_max_wins(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``.

    When ``maximum < minimum`` the maximum is returned, so the result never
    exceeds ``maximum``.
    """

    return min(max(value, minimum), maximum)


def clamp_min_wins(value: float, minimum: float, maximum: float) -> float:
    """Clamp ``value`` into ``[minimum, maximum]``; the minimum wins on inverted bounds."""

    return max(min(value, maximum), minimum)


def exceeds(total: float, limit: float) -> bool:
    """Return ``True`` when ``total`` is larger than ``limit`` beyond round-off."""

    return total - limit > SIZE_TOLERANCE * max(1.0, abs(limit))


def size_or_zero(value: Optional[float]) -> float:
    return ZERO if value is None else value


def effective_minimum(ideal: Optional[float], minimum: float) -> float:
    """Space a side demands: its minimum when it has an ideal size, else nothing."""

    return ZERO if ideal is None else minimum


__all__ = [
    "SIZE_TOLERANCE",
    "UNBOUNDED",
    "ZERO",
    "clamp_max_wins",
    "clamp_min_wins",
    "effective_minimum",
    "exceeds",
    "size_or_zero",
]
