"""Process-wide defaults for named strategy selection."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Strategy names used when a caller does not pick one."""

    resize_strategy: str = "preserveSides"
    side_resize_strategy: str = "consume"


_LAYOUT_CONFIG = LayoutConfig()


def get_layout_config() -> LayoutConfig:
    return copy.deepcopy(_LAYOUT_CONFIG)


def set_layout_config(config: LayoutConfig) -> None:
    from .strategies import RESIZE_STRATEGY_OPTIONS, SIDE_RESIZE_STRATEGY_OPTIONS
    from .validate import validate_string_options

    validate_string_options("resize_strategy", config.resize_strategy, RESIZE_STRATEGY_OPTIONS)
    validate_string_options(
        "side_resize_strategy", config.side_resize_strategy, SIDE_RESIZE_STRATEGY_OPTIONS
    )

    global _LAYOUT_CONFIG
    _LAYOUT_CONFIG = copy.deepcopy(config)
