"""Strategies deciding the side sizes after the container size changes.

Each strategy reads a :class:`~trisplit.model.LayoutView` and proposes new
start and end sizes; the middle segment always takes what is left. A side
whose ideal size is absent never asks for space.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..flex import flex_segments
from ..logging_utils import apply_debug_logging
from ..math_utils import UNBOUNDED, clamp_max_wins, effective_minimum, size_or_zero
from ..model import FlexSegment, LayoutView, ResizeResult

logger = logging.getLogger(__name__)

_COLLAPSED = ResizeResult(start_size=None, end_size=None)


def _clamped_ideal(ideal: Optional[float], minimum: float, maximum: float) -> Optional[float]:
    if ideal is None:
        return None
    return clamp_max_wins(ideal, minimum, maximum)


def _flex_sides(view: LayoutView, middle: FlexSegment) -> ResizeResult:
    start_size, _, end_size = flex_segments(
        (
            FlexSegment(view.start_ideal, view.start_min, view.start_max),
            middle,
            FlexSegment(view.end_ideal, view.end_min, view.end_max),
        ),
        view.size,
    )
    return ResizeResult(start_size=start_size, end_size=end_size)


def proportional_resize_strategy(view: LayoutView) -> ResizeResult:
    """Scale all three segments in proportion to their ideal sizes."""

    start_min = effective_minimum(view.start_ideal, view.start_min)
    end_min = effective_minimum(view.end_ideal, view.end_min)

    if view.size < view.middle_min + start_min + end_min:
        logger.debug("proportional: size=%s below minimum total, collapsing sides", view.size)
        return _COLLAPSED

    return _flex_sides(view, FlexSegment(view.middle_ideal, view.middle_min, UNBOUNDED))


def preserve_sides_resize_strategy(view: LayoutView) -> ResizeResult:
    """Keep both sides at their ideal sizes; the middle absorbs the change."""

    start_min = effective_minimum(view.start_ideal, view.start_min)
    end_min = effective_minimum(view.end_ideal, view.end_min)
    start_ideal = _clamped_ideal(view.start_ideal, view.start_min, view.start_max)
    end_ideal = _clamped_ideal(view.end_ideal, view.end_min, view.end_max)

    max_sides = view.size - view.middle_min

    if max_sides < start_min + end_min:
        logger.debug("preserve_sides: %s available for sides, collapsing", max_sides)
        return _COLLAPSED

    if max_sides < size_or_zero(start_ideal) + size_or_zero(end_ideal):
        middle = FlexSegment(view.middle_min, view.middle_min, view.middle_min)
        return _flex_sides(view, middle)

    return ResizeResult(start_size=start_ideal, end_size=end_ideal)


def preserve_middle_resize_strategy(view: LayoutView) -> ResizeResult:
    """Keep the middle at its ideal size; the sides absorb the change."""

    start_min = effective_minimum(view.start_ideal, view.start_min)
    end_min = effective_minimum(view.end_ideal, view.end_min)

    middle_max = view.size - start_min - end_min

    if middle_max < view.middle_min:
        logger.debug("preserve_middle: middle would get %s, collapsing sides", middle_max)
        return _COLLAPSED

    if middle_max < view.middle_ideal:
        return ResizeResult(
            start_size=None if view.start_ideal is None else view.start_min,
            end_size=None if view.end_ideal is None else view.end_min,
        )

    middle = FlexSegment(view.middle_ideal, view.middle_ideal, view.middle_ideal)
    return _flex_sides(view, middle)


__all__ = [
    "preserve_middle_resize_strategy",
    "preserve_sides_resize_strategy",
    "proportional_resize_strategy",
]


apply_debug_logging(globals(), logger=logger)
