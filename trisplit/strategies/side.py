"""Strategies deciding the side sizes when one side is resized directly.

Each strategy receives the current view, whether the start side is the one
being resized, and the requested size (``None`` collapses the side). It
returns the new size of that side and the resulting size of the other one.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..logging_utils import apply_debug_logging
from ..math_utils import ZERO, clamp_max_wins, size_or_zero
from ..model import LayoutView, SideResizeResult

logger = logging.getLogger(__name__)


def _side_bounds(view: LayoutView, is_start: bool) -> tuple[float, float]:
    if is_start:
        return view.start_min, view.start_max
    return view.end_min, view.end_max


def _other_side(view: LayoutView, is_start: bool) -> tuple[Optional[float], float]:
    if is_start:
        return view.end_size, view.end_min
    return view.start_size, view.start_min


def consume_side_resize_strategy(
    view: LayoutView, is_start: bool, target_size: Optional[float]
) -> SideResizeResult:
    """Grow into the middle first, then take space from the other side.

    The other side never shrinks below its own minimum.
    """

    other_size, other_min = _other_side(view, is_start)
    if target_size is None:
        return SideResizeResult(bar_size=None, other_bar_size=other_size)

    bar_min, bar_max = _side_bounds(view, is_start)
    sides_max = view.size - view.middle_min

    # an absent other side has nothing to give up and reserves nothing
    reserved = ZERO if other_size is None else other_min
    available = min(sides_max - reserved, bar_max)
    bar_size = clamp_max_wins(target_size, bar_min, available)

    if other_size is not None:
        new_other = min(other_size, sides_max - bar_size)
        if new_other != other_size:
            logger.debug("consume: other side gives up %s", other_size - new_other)
        other_size = new_other

    return SideResizeResult(bar_size=bar_size, other_bar_size=other_size)


def constrain_side_resize_strategy(
    view: LayoutView, is_start: bool, target_size: Optional[float]
) -> SideResizeResult:
    """Grow only into the space the middle can spare; the other side is untouched."""

    other_size, _ = _other_side(view, is_start)
    if target_size is None:
        return SideResizeResult(bar_size=None, other_bar_size=other_size)

    bar_min, bar_max = _side_bounds(view, is_start)
    available = min(view.size - view.middle_min - size_or_zero(other_size), bar_max)
    bar_size = clamp_max_wins(target_size, bar_min, available)

    return SideResizeResult(bar_size=bar_size, other_bar_size=other_size)


__all__ = ["consume_side_resize_strategy", "constrain_side_resize_strategy"]


apply_debug_logging(globals(), logger=logger)
