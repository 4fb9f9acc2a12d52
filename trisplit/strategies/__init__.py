"""Named registries for the resize and side resize strategies."""

from __future__ import annotations

from typing import Dict, Optional

from ..config import get_layout_config
from ..model import ResizeStrategy, SideResizeStrategy
from ..validate import validate_string_options
from .resize import (
    preserve_middle_resize_strategy,
    preserve_sides_resize_strategy,
    proportional_resize_strategy,
)
from .side import consume_side_resize_strategy, constrain_side_resize_strategy

RESIZE_STRATEGIES: Dict[str, ResizeStrategy] = {
    "preserveMiddle": preserve_middle_resize_strategy,
    "preserveSides": preserve_sides_resize_strategy,
    "proportional": proportional_resize_strategy,
}

SIDE_RESIZE_STRATEGIES: Dict[str, SideResizeStrategy] = {
    "constrain": constrain_side_resize_strategy,
    "consume": consume_side_resize_strategy,
}

RESIZE_STRATEGY_OPTIONS = tuple(RESIZE_STRATEGIES)
SIDE_RESIZE_STRATEGY_OPTIONS = tuple(SIDE_RESIZE_STRATEGIES)


def get_resize_strategy(name: object = None) -> ResizeStrategy:
    """Return the resize strategy registered as ``name``.

    ``None`` selects the configured default (``preserveSides`` unless changed
    through :func:`trisplit.config.set_layout_config`).
    """

    if name is None:
        name = get_layout_config().resize_strategy
    return RESIZE_STRATEGIES[validate_string_options("resize_strategy", name, RESIZE_STRATEGY_OPTIONS)]


def get_side_resize_strategy(name: object = None) -> SideResizeStrategy:
    """Return the side resize strategy registered as ``name`` (default ``consume``)."""

    if name is None:
        name = get_layout_config().side_resize_strategy
    return SIDE_RESIZE_STRATEGIES[
        validate_string_options("side_resize_strategy", name, SIDE_RESIZE_STRATEGY_OPTIONS)
    ]


def resize_strategy_name(strategy: object) -> Optional[str]:
    for name, registered in RESIZE_STRATEGIES.items():
        if registered is strategy:
            return name
    return None


def side_resize_strategy_name(strategy: object) -> Optional[str]:
    for name, registered in SIDE_RESIZE_STRATEGIES.items():
        if registered is strategy:
            return name
    return None


__all__ = [
    "RESIZE_STRATEGIES",
    "RESIZE_STRATEGY_OPTIONS",
    "SIDE_RESIZE_STRATEGIES",
    "SIDE_RESIZE_STRATEGY_OPTIONS",
    "consume_side_resize_strategy",
    "constrain_side_resize_strategy",
    "get_resize_strategy",
    "get_side_resize_strategy",
    "preserve_middle_resize_strategy",
    "preserve_sides_resize_strategy",
    "proportional_resize_strategy",
    "resize_strategy_name",
    "side_resize_strategy_name",
]
