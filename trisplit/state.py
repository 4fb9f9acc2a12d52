"""Stateful three segment layout: start side, middle body, end side.

:class:`LayoutState` owns the container size, the side bounds and the ideal
sizes, and delegates the actual space allocation to the active strategies.
Strategy proposals are validated before they are committed; a call that
raises leaves the layout exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional

from .math_utils import UNBOUNDED, ZERO, exceeds, size_or_zero
from .model import LayoutView, ResizeResult, ResizeStrategy, SideResizeResult, SideResizeStrategy
from .strategies import get_resize_strategy, get_side_resize_strategy
from .validate import (
    SizeRangeError,
    validate_function,
    validate_object,
    validate_size,
    validate_size_interval,
)

logger = logging.getLogger(__name__)

# Configuration keys accepted by ``LayoutState.from_parameters``.
PARAMETER_KEYS = {
    "size": "size",
    "startMin": "start_min",
    "startMax": "start_max",
    "startSize": "start_size",
    "middleMin": "middle_min",
    "endMin": "end_min",
    "endMax": "end_max",
    "endSize": "end_size",
    "resizeStrategy": "resize_strategy",
    "sideResizeStrategy": "side_resize_strategy",
}
PARAMETER_KEYS.update({name: name for name in list(PARAMETER_KEYS.values())})


def _resize_strategy_or_default(strategy: object) -> ResizeStrategy:
    if strategy is None:
        return get_resize_strategy()
    validate_function("resize_strategy", strategy)
    return strategy  # type: ignore[return-value]


def _side_resize_strategy_or_default(strategy: object) -> SideResizeStrategy:
    if strategy is None:
        return get_side_resize_strategy()
    validate_function("side_resize_strategy", strategy)
    return strategy  # type: ignore[return-value]


def _side_extrema(name: str, minimum: object, maximum: object) -> tuple[float, float]:
    return validate_size_interval(
        f"{name}_min",
        f"{name}_max",
        f"{name}_extrema",
        ZERO if minimum is None else minimum,
        UNBOUNDED if maximum is None else maximum,
    )


def _optional_size(name: str, value: object, minimum: float, maximum: float) -> Optional[float]:
    if value is None:
        return None
    return validate_size(name, value, minimum, True, maximum, True)


class LayoutState:
    """Sizes of a start side, a middle body and an end side filling ``size``."""

    def __init__(
        self,
        size: float,
        *,
        start_min: Optional[float] = None,
        start_max: Optional[float] = None,
        start_size: Optional[float] = None,
        middle_min: Optional[float] = None,
        end_min: Optional[float] = None,
        end_max: Optional[float] = None,
        end_size: Optional[float] = None,
        resize_strategy: Optional[ResizeStrategy] = None,
        side_resize_strategy: Optional[SideResizeStrategy] = None,
    ) -> None:
        size = validate_size("size", size)
        start_min, start_max = _side_extrema("start", start_min, start_max)
        start_size = _optional_size("start_size", start_size, start_min, start_max)
        end_min, end_max = _side_extrema("end", end_min, end_max)
        end_size = _optional_size("end_size", end_size, end_min, end_max)
        middle_min = validate_size("middle_min", ZERO if middle_min is None else middle_min)

        candidate = LayoutView(
            size=size,
            start_min=start_min,
            start_max=start_max,
            start_size=start_size,
            start_ideal=start_size,
            middle_min=middle_min,
            middle_ideal=max(size - size_or_zero(start_size) - size_or_zero(end_size), middle_min),
            end_min=end_min,
            end_max=end_max,
            end_size=end_size,
            end_ideal=end_size,
            resize_strategy=_resize_strategy_or_default(resize_strategy),
            side_resize_strategy=_side_resize_strategy_or_default(side_resize_strategy),
        )
        self._view = self._resolve_sides(candidate)

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, Any]) -> "LayoutState":
        """Build a layout from a configuration mapping.

        Keys may be given in camelCase (``startMin``) or snake_case
        (``start_min``); strategies may be given by name.
        """

        validate_object("parameters", parameters, ("size",), PARAMETER_KEYS)
        kwargs = {PARAMETER_KEYS[key]: value for key, value in parameters.items()}

        resize_strategy = kwargs.get("resize_strategy")
        if resize_strategy is None or isinstance(resize_strategy, str):
            kwargs["resize_strategy"] = get_resize_strategy(resize_strategy)
        side_resize_strategy = kwargs.get("side_resize_strategy")
        if side_resize_strategy is None or isinstance(side_resize_strategy, str):
            kwargs["side_resize_strategy"] = get_side_resize_strategy(side_resize_strategy)

        size = kwargs.pop("size")
        return cls(size, **kwargs)

    def __repr__(self) -> str:
        return (
            f"LayoutState(size={self.size!r}, start_size={self.start_size!r}, "
            f"middle_size={self.middle_size!r}, end_size={self.end_size!r})"
        )

    # -- read access -----------------------------------------------------

    @property
    def view(self) -> LayoutView:
        """The current immutable snapshot."""
        return self._view

    @property
    def size(self) -> float:
        return self._view.size

    @property
    def start_min(self) -> float:
        return self._view.start_min

    @property
    def start_max(self) -> float:
        return self._view.start_max

    @property
    def start_size(self) -> Optional[float]:
        return self._view.start_size

    @property
    def start_ideal(self) -> Optional[float]:
        return self._view.start_ideal

    @property
    def middle_min(self) -> float:
        return self._view.middle_min

    @property
    def middle_ideal(self) -> float:
        return self._view.middle_ideal

    @property
    def middle_size(self) -> float:
        return self._view.middle_size

    @property
    def end_min(self) -> float:
        return self._view.end_min

    @property
    def end_max(self) -> float:
        return self._view.end_max

    @property
    def end_size(self) -> Optional[float]:
        return self._view.end_size

    @property
    def end_ideal(self) -> Optional[float]:
        return self._view.end_ideal

    @property
    def resize_strategy(self) -> ResizeStrategy:
        return self._view.resize_strategy

    @property
    def side_resize_strategy(self) -> SideResizeStrategy:
        return self._view.side_resize_strategy

    # -- mutators --------------------------------------------------------

    def set_size(self, size: float) -> None:
        """Resize the container; ideal sizes are kept."""
        size = validate_size("size", size)
        self._view = self._resolve_sides(replace(self._view, size=size))

    def set_start_extrema(self, start_min: Optional[float] = None, start_max: Optional[float] = None) -> None:
        start_min, start_max = _side_extrema("start", start_min, start_max)
        self._view = self._resolve_sides(replace(self._view, start_min=start_min, start_max=start_max))

    def set_end_extrema(self, end_min: Optional[float] = None, end_max: Optional[float] = None) -> None:
        end_min, end_max = _side_extrema("end", end_min, end_max)
        self._view = self._resolve_sides(replace(self._view, end_min=end_min, end_max=end_max))

    def set_middle_min(self, middle_min: Optional[float] = None) -> None:
        middle_min = validate_size("middle_min", ZERO if middle_min is None else middle_min)
        view = self._view
        middle_ideal = max(
            view.size - size_or_zero(view.start_ideal) - size_or_zero(view.end_ideal),
            middle_min,
        )
        self._view = self._resolve_sides(
            replace(view, middle_min=middle_min, middle_ideal=middle_ideal)
        )

    def set_resize_strategy(self, resize_strategy: Optional[ResizeStrategy] = None) -> None:
        """Swap the resize strategy and apply it straight away."""
        resize_strategy = _resize_strategy_or_default(resize_strategy)
        self._view = self._resolve_sides(replace(self._view, resize_strategy=resize_strategy))

    def set_side_resize_strategy(self, side_resize_strategy: Optional[SideResizeStrategy] = None) -> None:
        """Swap the side strategy; it takes effect on the next direct side resize."""
        side_resize_strategy = _side_resize_strategy_or_default(side_resize_strategy)
        self._view = replace(self._view, side_resize_strategy=side_resize_strategy)

    def set_start_size(self, start_size: Optional[float]) -> None:
        """Resize the start side directly; the result becomes the new ideal."""
        self._resize_side(True, start_size)

    def set_end_size(self, end_size: Optional[float]) -> None:
        """Resize the end side directly; the result becomes the new ideal."""
        self._resize_side(False, end_size)

    # -- internals -------------------------------------------------------

    def _resolve_sides(self, candidate: LayoutView) -> LayoutView:
        result = self._check_resize_result(candidate, candidate.resize_strategy(candidate))
        resolved = replace(candidate, start_size=result.start_size, end_size=result.end_size)
        logger.debug(
            "_resolve_sides: size=%s start=%s middle=%s end=%s",
            resolved.size,
            resolved.start_size,
            resolved.middle_size,
            resolved.end_size,
        )
        return resolved

    def _resize_side(self, is_start: bool, target_size: Optional[float]) -> None:
        name = "start_size" if is_start else "end_size"
        if target_size is not None:
            target_size = validate_size(name, target_size)

        view = self._view
        result = self._check_side_result(
            view, view.side_resize_strategy(view, is_start, target_size), is_start
        )
        if is_start:
            start_size, end_size = result.bar_size, result.other_bar_size
        else:
            start_size, end_size = result.other_bar_size, result.bar_size

        self._view = replace(
            view,
            start_size=start_size,
            start_ideal=start_size,
            end_size=end_size,
            end_ideal=end_size,
            middle_ideal=view.size - size_or_zero(start_size) - size_or_zero(end_size),
        )
        logger.debug(
            "_resize_side: %s=%s -> start=%s middle=%s end=%s",
            name,
            target_size,
            start_size,
            self._view.middle_size,
            end_size,
        )

    @staticmethod
    def _check_resize_result(view: LayoutView, value: object) -> ResizeResult:
        if not isinstance(value, ResizeResult):
            mapping = validate_object("resize_strategy()", value, (), ("start_size", "end_size"))
            value = ResizeResult(**mapping)

        start_size = _optional_size(
            "resize_strategy().start_size", value.start_size, view.start_min, view.start_max
        )
        end_size = _optional_size("resize_strategy().end_size", value.end_size, view.end_min, view.end_max)

        sides_max = max(ZERO, view.size - view.middle_min)
        sides_total = size_or_zero(start_size) + size_or_zero(end_size)
        if exceeds(sides_total, sides_max):
            raise SizeRangeError("resize_strategy()", sides_total, ZERO, True, sides_max, True)

        return ResizeResult(start_size=start_size, end_size=end_size)

    @staticmethod
    def _check_side_result(view: LayoutView, value: object, is_start: bool) -> SideResizeResult:
        if not isinstance(value, SideResizeResult):
            mapping = validate_object(
                "side_resize_strategy()", value, (), ("bar_size", "other_bar_size")
            )
            value = SideResizeResult(**mapping)

        if is_start:
            bar_bounds = (view.start_min, view.start_max)
            other_bounds = (view.end_min, view.end_max)
            current_other = view.end_size
        else:
            bar_bounds = (view.end_min, view.end_max)
            other_bounds = (view.start_min, view.start_max)
            current_other = view.start_size

        bar_size = _optional_size("side_resize_strategy().bar_size", value.bar_size, *bar_bounds)
        other_size = _optional_size(
            "side_resize_strategy().other_bar_size", value.other_bar_size, *other_bounds
        )
        if other_size is None:
            other_size = current_other

        sides_max = view.size - view.middle_min
        sides_total = size_or_zero(bar_size) + size_or_zero(other_size)
        if exceeds(sides_total, sides_max):
            raise SizeRangeError("side_resize_strategy()", sides_total, ZERO, True, sides_max, True)

        return SideResizeResult(bar_size=bar_size, other_bar_size=other_size)


__all__ = ["LayoutState"]
