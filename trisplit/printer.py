from typing import List, Optional

from .math_utils import UNBOUNDED
from .model import LayoutView
from .strategies import resize_strategy_name, side_resize_strategy_name


def format_size(value: Optional[float]) -> str:
    if value is None:
        return "-"
    if value >= UNBOUNDED:
        return "inf"
    return format(value, ".6g")


def format_layout(view: LayoutView) -> str:
    return (
        f"start={format_size(view.start_size)} "
        f"middle={format_size(view.middle_size)} "
        f"end={format_size(view.end_size)} "
        f"(size={format_size(view.size)})"
    )


def _strategy_label(name: Optional[str], strategy: object) -> str:
    if name is not None:
        return name
    return getattr(strategy, "__qualname__", type(strategy).__name__)


def format_layout_details(view: LayoutView) -> str:
    """Multi-line dump of bounds, ideal and committed sizes of ``view``."""
    lines: List[str] = [
        f"size: {format_size(view.size)}",
        (
            f"start: size={format_size(view.start_size)} ideal={format_size(view.start_ideal)} "
            f"bounds=[{format_size(view.start_min)}, {format_size(view.start_max)}]"
        ),
        (
            f"middle: size={format_size(view.middle_size)} ideal={format_size(view.middle_ideal)} "
            f"min={format_size(view.middle_min)}"
        ),
        (
            f"end: size={format_size(view.end_size)} ideal={format_size(view.end_ideal)} "
            f"bounds=[{format_size(view.end_min)}, {format_size(view.end_max)}]"
        ),
        f"resize strategy: {_strategy_label(resize_strategy_name(view.resize_strategy), view.resize_strategy)}",
        (
            "side resize strategy: "
            f"{_strategy_label(side_resize_strategy_name(view.side_resize_strategy), view.side_resize_strategy)}"
        ),
    ]
    return "\n".join(lines) + "\n"
