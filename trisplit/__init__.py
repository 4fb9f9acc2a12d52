from .math_utils import UNBOUNDED, ZERO, clamp_max_wins, clamp_min_wins
from .validate import (
    IntervalExtremaError,
    LayoutError,
    LayoutTypeError,
    MissingPropertyError,
    NotAFunctionError,
    NotASizeError,
    NotAStringError,
    NotAnObjectError,
    SizeRangeError,
    UnknownPropertyError,
    UnknownStringOptionError,
)
from .model import FlexSegment, LayoutView, ResizeResult, SideResizeResult
from .flex import distribute, flex_segments
from .config import LayoutConfig, get_layout_config, set_layout_config
from .strategies import (
    RESIZE_STRATEGY_OPTIONS,
    SIDE_RESIZE_STRATEGY_OPTIONS,
    consume_side_resize_strategy,
    constrain_side_resize_strategy,
    get_resize_strategy,
    get_side_resize_strategy,
    preserve_middle_resize_strategy,
    preserve_sides_resize_strategy,
    proportional_resize_strategy,
    resize_strategy_name,
    side_resize_strategy_name,
)
from .state import LayoutState
from .printer import format_layout, format_layout_details, format_size
from .scenario import Scenario, ScenarioError, ScenarioStep, load_scenario, parse_scenario, run_scenario

__all__ = [
    'UNBOUNDED',
    'ZERO',
    'clamp_max_wins',
    'clamp_min_wins',
    'IntervalExtremaError',
    'LayoutError',
    'LayoutTypeError',
    'MissingPropertyError',
    'NotAFunctionError',
    'NotASizeError',
    'NotAStringError',
    'NotAnObjectError',
    'SizeRangeError',
    'UnknownPropertyError',
    'UnknownStringOptionError',
    'FlexSegment',
    'LayoutView',
    'ResizeResult',
    'SideResizeResult',
    'distribute',
    'flex_segments',
    'LayoutConfig',
    'get_layout_config',
    'set_layout_config',
    'RESIZE_STRATEGY_OPTIONS',
    'SIDE_RESIZE_STRATEGY_OPTIONS',
    'consume_side_resize_strategy',
    'constrain_side_resize_strategy',
    'get_resize_strategy',
    'get_side_resize_strategy',
    'preserve_middle_resize_strategy',
    'preserve_sides_resize_strategy',
    'proportional_resize_strategy',
    'resize_strategy_name',
    'side_resize_strategy_name',
    'LayoutState',
    'format_layout',
    'format_layout_details',
    'format_size',
    'Scenario',
    'ScenarioError',
    'ScenarioStep',
    'load_scenario',
    'parse_scenario',
    'run_scenario',
]
