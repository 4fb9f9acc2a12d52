"""Core data structures shared by the strategies and the layout state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .math_utils import UNBOUNDED, ZERO, size_or_zero


@dataclass(frozen=True)
class FlexSegment:
    """One slot handed to the flex distributor.

    ``ideal`` doubles as the slot's weight; ``None`` marks an absent slot.
    """

    ideal: Optional[float]
    minimum: float = ZERO
    maximum: float = UNBOUNDED


@dataclass(frozen=True)
class ResizeResult:
    start_size: Optional[float] = None
    end_size: Optional[float] = None


@dataclass(frozen=True)
class SideResizeResult:
    """Outcome of a direct side resize.

    ``bar_size`` is the new size of the side being resized and
    ``other_bar_size`` the resulting size of the opposite side.
    """

    bar_size: Optional[float] = None
    other_bar_size: Optional[float] = None


@dataclass(frozen=True)
class LayoutView:
    """Immutable snapshot of a layout, the only thing strategies get to see."""

    size: float
    start_min: float
    start_max: float
    start_size: Optional[float]
    start_ideal: Optional[float]
    middle_min: float
    middle_ideal: float
    end_min: float
    end_max: float
    end_size: Optional[float]
    end_ideal: Optional[float]
    resize_strategy: "ResizeStrategy"
    side_resize_strategy: "SideResizeStrategy"

    @property
    def middle_size(self) -> float:
        return self.size - size_or_zero(self.start_size) - size_or_zero(self.end_size)

    @property
    def sides_size(self) -> float:
        return size_or_zero(self.start_size) + size_or_zero(self.end_size)


ResizeStrategy = Callable[[LayoutView], ResizeResult]
SideResizeStrategy = Callable[[LayoutView, bool, Optional[float]], SideResizeResult]


__all__ = [
    "FlexSegment",
    "LayoutView",
    "ResizeResult",
    "ResizeStrategy",
    "SideResizeResult",
    "SideResizeStrategy",
]
