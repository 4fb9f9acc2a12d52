"""Value validators and the error types they raise.

Every error carries the name of the offending value (``value_name``) and the
value itself so a UI layer can point at the field that was rejected.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Mapping, Sequence

from .math_utils import UNBOUNDED, ZERO


class LayoutError(ValueError):
    """Base class for rejected layout values."""

    def __init__(self, value_name: str, value: Any, message: str):
        super().__init__(f"{value_name}: {message}")
        self.value_name = value_name
        self.value = value


class LayoutTypeError(TypeError):
    """Base class for values of the wrong type."""

    def __init__(self, value_name: str, value: Any, message: str):
        super().__init__(f"{value_name}: {message}")
        self.value_name = value_name
        self.value = value


class NotASizeError(LayoutTypeError):
    def __init__(self, value_name: str, value: Any):
        super().__init__(value_name, value, f"size is not a finite number. Given: {value!r}.")


class NotAStringError(LayoutTypeError):
    def __init__(self, value_name: str, value: Any):
        super().__init__(value_name, value, f"value is not a string. Given: {value!r}.")


class NotAFunctionError(LayoutTypeError):
    def __init__(self, value_name: str, value: Any):
        super().__init__(value_name, value, f"value is not callable. Given: {value!r}.")


class UnknownStringOptionError(LayoutError):
    def __init__(self, value_name: str, value: str, options: Sequence[str]):
        super().__init__(
            value_name,
            value,
            f"value is not a valid option. Expected: {', '.join(options)}; Given: {value!r}.",
        )
        self.options = tuple(options)


def _bound_symbol(inclusive: bool) -> str:
    return "<=" if inclusive else "<"


class SizeRangeError(LayoutError):
    def __init__(
        self,
        value_name: str,
        value: float,
        minimum: float,
        inclusive_minimum: bool,
        maximum: float,
        inclusive_maximum: bool,
    ):
        super().__init__(
            value_name,
            value,
            "size is outside the valid range. Expected: "
            f"{minimum} {_bound_symbol(inclusive_minimum)} x {_bound_symbol(inclusive_maximum)} {maximum}; "
            f"Given: {value}.",
        )
        self.minimum = minimum
        self.inclusive_minimum = inclusive_minimum
        self.maximum = maximum
        self.inclusive_maximum = inclusive_maximum


class IntervalExtremaError(LayoutError):
    def __init__(self, value_name: str, minimum: float, maximum: float):
        super().__init__(
            value_name,
            (minimum, maximum),
            f"interval minimum must not exceed maximum. Given: {minimum}-{maximum}.",
        )
        self.minimum = minimum
        self.maximum = maximum


class NotAnObjectError(LayoutError):
    def __init__(self, value_name: str, value: Any):
        super().__init__(value_name, value, f"value is not a mapping. Given: {value!r}.")


class MissingPropertyError(LayoutError):
    def __init__(self, value_name: str, value: Any, key: str):
        super().__init__(value_name, value, f"missing required property {key!r}.")
        self.property = key


class UnknownPropertyError(LayoutError):
    def __init__(self, value_name: str, value: Any, key: str):
        super().__init__(value_name, value, f"unknown property {key!r}.")
        self.property = key


def is_size_number(value: object) -> bool:
    """Return ``True`` for finite real numbers (booleans excluded)."""

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(float(value))


def validate_size(
    value_name: str,
    value: object,
    minimum: float = ZERO,
    inclusive_minimum: bool = True,
    maximum: float = UNBOUNDED,
    inclusive_maximum: bool = True,
) -> float:
    """Return ``value`` as a float, or raise when it is not a size in range."""

    if not is_size_number(value):
        raise NotASizeError(value_name, value)
    size = float(value)  # type: ignore[arg-type]
    if (
        (inclusive_minimum and size < minimum)
        or (not inclusive_minimum and size <= minimum)
        or (inclusive_maximum and size > maximum)
        or (not inclusive_maximum and size >= maximum)
    ):
        raise SizeRangeError(value_name, size, minimum, inclusive_minimum, maximum, inclusive_maximum)
    return size


def validate_size_interval(
    min_name: str,
    max_name: str,
    extrema_name: str,
    minimum: object,
    maximum: object,
) -> tuple[float, float]:
    low = validate_size(min_name, minimum)
    high = validate_size(max_name, maximum)
    if low > high:
        raise IntervalExtremaError(extrema_name, low, high)
    return low, high


def validate_string_options(value_name: str, value: object, options: Sequence[str]) -> str:
    if not isinstance(value, str):
        raise NotAStringError(value_name, value)
    if value not in options:
        raise UnknownStringOptionError(value_name, value, options)
    return value


def validate_function(value_name: str, value: object) -> None:
    if not callable(value):
        raise NotAFunctionError(value_name, value)


def validate_object(
    value_name: str,
    value: object,
    required: Iterable[str],
    optional: Iterable[str],
) -> Mapping[str, Any]:
    """Check that ``value`` is a mapping with exactly the permitted keys."""

    if not isinstance(value, Mapping):
        raise NotAnObjectError(value_name, value)
    required = tuple(required)
    allowed = set(required) | set(optional)
    for key in required:
        if key not in value:
            raise MissingPropertyError(value_name, value, key)
    for key in value:
        if key not in allowed:
            raise UnknownPropertyError(value_name, value, key)
    return value


__all__ = [
    "IntervalExtremaError",
    "LayoutError",
    "LayoutTypeError",
    "MissingPropertyError",
    "NotAFunctionError",
    "NotASizeError",
    "NotAStringError",
    "NotAnObjectError",
    "SizeRangeError",
    "UnknownPropertyError",
    "UnknownStringOptionError",
    "is_size_number",
    "validate_function",
    "validate_object",
    "validate_size",
    "validate_size_interval",
    "validate_string_options",
]
