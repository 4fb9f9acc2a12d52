"""Iterative proportional distribution of a target size over bounded slots.

Every active slot starts at its ideal size, which is also its weight. Each
pass hands the remaining space (positive or negative) to the slots that can
still move, in proportion to their weights, and clamps the result to the
slot's bounds. A slot stops moving once it hits a bound or once a pass no
longer changes it, so the number of flexible slots only ever decreases.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from .logging_utils import apply_debug_logging
from .math_utils import ZERO, clamp_max_wins
from .model import FlexSegment

logger = logging.getLogger(__name__)

# Floating point round-off can leave a sliver of space that keeps nudging the
# same slots; a few passes per slot is always enough otherwise.
_PASSES_PER_SLOT = 4


def _clamp_max_wins_array(values: np.ndarray, lows: np.ndarray, highs: np.ndarray) -> np.ndarray:
    return np.minimum(np.maximum(values, lows), highs)


def distribute(
    ideals: Sequence[Optional[float]],
    minimums: Sequence[float],
    maximums: Sequence[float],
    target: float,
) -> List[Optional[float]]:
    """Distribute ``target`` over the slots described by the parallel sequences.

    Slots with an absent ideal take no space and come back as ``None``. Slots
    with a zero ideal have no weight and are held at their lower bound.
    """

    count = len(ideals)
    if not (len(minimums) == len(maximums) == count):
        raise ValueError("distribute requires ideals, minimums and maximums of equal length")

    weights = np.zeros(count, dtype=float)
    sizes = np.zeros(count, dtype=float)
    lows = np.zeros(count, dtype=float)
    highs = np.zeros(count, dtype=float)

    for idx, ideal in enumerate(ideals):
        if ideal is None:
            continue
        lows[idx] = minimums[idx]
        highs[idx] = maximums[idx]
        if ideal > ZERO:
            weights[idx] = ideal
            sizes[idx] = ideal
        else:
            sizes[idx] = clamp_max_wins(ZERO, minimums[idx], maximums[idx])

    flexible = weights > ZERO
    max_passes = _PASSES_PER_SLOT * count + 1
    passes = 0

    while flexible.any():
        if passes >= max_passes:
            logger.warning(
                "distribute: stopped after %d passes with %d slot(s) still flexible",
                passes,
                int(flexible.sum()),
            )
            break
        passes += 1

        active = np.flatnonzero(flexible)
        remaining = target
        for size in sizes:
            remaining -= float(size)
        ratio = remaining / float(np.sum(weights[active]))

        previous = sizes[active]
        proposed = previous + weights[active] * ratio
        clamped = _clamp_max_wins_array(proposed, lows[active], highs[active])
        sizes[active] = clamped

        frozen = (clamped == previous) | (clamped != proposed)
        flexible[active[frozen]] = False

        logger.debug(
            "distribute: pass=%d remaining=%.6g ratio=%.6g sizes=%s frozen=%s",
            passes,
            remaining,
            ratio,
            sizes.tolist(),
            active[frozen].tolist(),
        )

    return [None if ideal is None else float(size) for ideal, size in zip(ideals, sizes)]


def flex_segments(segments: Sequence[FlexSegment], target: float) -> List[Optional[float]]:
    """Distribute ``target`` over ``segments``; see :func:`distribute`."""

    return distribute(
        [segment.ideal for segment in segments],
        [segment.minimum for segment in segments],
        [segment.maximum for segment in segments],
        target,
    )


__all__ = ["distribute", "flex_segments"]


apply_debug_logging(globals(), logger=logger)
