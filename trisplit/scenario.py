"""Scenario files: an initial layout plus a list of operations to replay.

A scenario is a JSON object::

    {
      "layout": {"size": 600, "startSize": 300, "startMin": 250, ...},
      "steps": [
        {"op": "setSize", "size": 400},
        {"op": "setStartSize", "size": null},
        {"op": "setResizeStrategy", "strategy": "proportional"}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

from .model import LayoutView
from .state import PARAMETER_KEYS, LayoutState
from .strategies import get_resize_strategy, get_side_resize_strategy
from .validate import (
    LayoutError,
    MissingPropertyError,
    NotAnObjectError,
    validate_object,
    validate_string_options,
)

logger = logging.getLogger(__name__)


class ScenarioError(LayoutError):
    """Raised when a scenario file cannot be read."""


# op -> (required fields, optional fields), ``op`` itself excluded
STEP_FIELDS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "setSize": (("size",), ()),
    "setStartSize": (("size",), ()),
    "setEndSize": (("size",), ()),
    "setStartExtrema": ((), ("min", "max")),
    "setEndExtrema": ((), ("min", "max")),
    "setMiddleMin": ((), ("min",)),
    "setResizeStrategy": ((), ("strategy",)),
    "setSideResizeStrategy": ((), ("strategy",)),
}

STEP_OPTIONS = tuple(STEP_FIELDS)


@dataclass
class ScenarioStep:
    op: str
    args: Dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        if not self.args:
            return self.op
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(self.args.items()))
        return f"{self.op} {rendered}"


@dataclass
class Scenario:
    parameters: Dict[str, Any]
    steps: List[ScenarioStep] = field(default_factory=list)


def parse_step(index: int, data: object) -> ScenarioStep:
    name = f"steps[{index}]"
    if not isinstance(data, Mapping):
        raise NotAnObjectError(name, data)
    if "op" not in data:
        raise MissingPropertyError(name, data, "op")
    op = validate_string_options(f"{name}.op", data["op"], STEP_OPTIONS)
    required, optional = STEP_FIELDS[op]
    validate_object(name, data, ("op",) + required, optional)
    args = {key: value for key, value in data.items() if key != "op"}
    return ScenarioStep(op=op, args=args)


def parse_scenario(data: object) -> Scenario:
    """Check the shape of a decoded scenario and build a :class:`Scenario`."""

    validate_object("scenario", data, ("layout",), ("steps",))
    layout = data["layout"]  # type: ignore[index]
    validate_object("layout", layout, ("size",), PARAMETER_KEYS)
    raw_steps = data.get("steps", [])  # type: ignore[union-attr]
    if not isinstance(raw_steps, list):
        raise ScenarioError("steps", raw_steps, "steps must be a list")
    steps = [parse_step(idx, step) for idx, step in enumerate(raw_steps)]
    return Scenario(parameters=dict(layout), steps=steps)


def load_scenario(path: Union[str, Path]) -> Scenario:
    path = Path(path)
    logger.info("Loading scenario from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScenarioError(str(path), None, f"cannot read scenario: {exc}") from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ScenarioError(str(path), None, f"invalid JSON: {exc}") from exc
    return parse_scenario(data)


_STEP_HANDLERS: Dict[str, Callable[[LayoutState, Dict[str, Any]], None]] = {
    "setSize": lambda state, args: state.set_size(args["size"]),
    "setStartSize": lambda state, args: state.set_start_size(args["size"]),
    "setEndSize": lambda state, args: state.set_end_size(args["size"]),
    "setStartExtrema": lambda state, args: state.set_start_extrema(args.get("min"), args.get("max")),
    "setEndExtrema": lambda state, args: state.set_end_extrema(args.get("min"), args.get("max")),
    "setMiddleMin": lambda state, args: state.set_middle_min(args.get("min")),
    "setResizeStrategy": lambda state, args: state.set_resize_strategy(
        get_resize_strategy(args.get("strategy"))
    ),
    "setSideResizeStrategy": lambda state, args: state.set_side_resize_strategy(
        get_side_resize_strategy(args.get("strategy"))
    ),
}


def apply_step(state: LayoutState, step: ScenarioStep) -> LayoutView:
    _STEP_HANDLERS[step.op](state, step.args)
    return state.view


def run_scenario(scenario: Scenario) -> List[LayoutView]:
    """Replay ``scenario``; returns the initial view followed by one view per step."""

    state = LayoutState.from_parameters(scenario.parameters)
    views = [state.view]
    logger.info("Initial layout: %r", state)
    for idx, step in enumerate(scenario.steps):
        views.append(apply_step(state, step))
        logger.info("Step %d (%s): %r", idx, step.describe(), state)
    return views


__all__ = [
    "STEP_FIELDS",
    "STEP_OPTIONS",
    "Scenario",
    "ScenarioError",
    "ScenarioStep",
    "apply_step",
    "load_scenario",
    "parse_scenario",
    "parse_step",
    "run_scenario",
]
