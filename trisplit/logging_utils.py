"""DEBUG call tracing for strategies and the flex distributor.

Modules opt in by calling ``apply_debug_logging(globals(), logger=logger)``
after their definitions. Tracing costs one ``isEnabledFor`` check per call
unless DEBUG is enabled for the module logger.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

_MAX_ITEMS = 6
_MAX_LENGTH = 300

_short_repr = reprlib.Repr()
_short_repr.maxstring = 60
_short_repr.maxother = 120


def configure_logging(level: str = "INFO") -> None:
    """Install a basic root handler at ``level`` (names are case-insensitive)."""

    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)


def _callable_name(value: Any) -> str:
    return getattr(value, "__qualname__", getattr(value, "__name__", type(value).__name__))


def _format_number(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, bool):
        return repr(value)
    if isinstance(value, float) and value >= 1e300:
        return "UNBOUNDED"
    return format(value, ".6g")


def _format_items(values: Iterable[Any]) -> str:
    rendered = []
    for idx, item in enumerate(values):
        if idx >= _MAX_ITEMS:
            rendered.append("...")
            break
        rendered.append(_safe_repr(item))
    return ", ".join(rendered)


def _summarise_array(value: np.ndarray) -> str:
    head = f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    if value.size == 0:
        return head
    if value.size <= _MAX_ITEMS:
        return f"{head} [{_format_items(value.tolist())}]"
    return f"{head} min={float(value.min()):.6g} max={float(value.max()):.6g}"


def _summarise_dataclass(value: Any) -> str:
    parts = []
    for field in dataclasses.fields(value):
        field_value = getattr(value, field.name)
        if callable(field_value):
            parts.append(f"{field.name}={_callable_name(field_value)}")
        else:
            parts.append(f"{field.name}={_safe_repr(field_value)}")
    return f"{type(value).__name__}({', '.join(parts)})"


def _safe_repr(value: Any) -> str:
    """Compact rendering of sizes, views, strategies and size lists."""

    if value is None or isinstance(value, (bool, int, float, np.floating, np.integer)):
        return _format_number(value)
    if isinstance(value, np.ndarray):
        return _summarise_array(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _summarise_dataclass(value)
    if inspect.isfunction(value) or inspect.ismethod(value):
        return f"<function {_callable_name(value)}>"
    if isinstance(value, Mapping):
        return "{" + _format_items(f"{key}: {_safe_repr(val)}" for key, val in value.items()) + "}"
    if isinstance(value, (list, tuple)):
        return f"[{_format_items(value)}]"

    rendered = _short_repr.repr(value)
    if len(rendered) > _MAX_LENGTH:
        return rendered[:_MAX_LENGTH] + "..."
    return rendered


def _describe_call(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    parts = [_safe_repr(arg) for arg in args]
    parts.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator logging entry, exit and failures of a call at DEBUG."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        label = name or _callable_name(func)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            tracing = logger.isEnabledFor(logging.DEBUG)
            if tracing:
                logger.debug("Entering %s(%s)", label, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if tracing:
                    logger.debug("Exception in %s", label, exc_info=True)
                raise
            if tracing:
                if log_result:
                    logger.debug("Exiting %s -> %s", label, _safe_repr(result))
                else:
                    logger.debug("Exiting %s", label)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the plain functions defined in ``namespace``'s module with call tracing.

    Imported functions and classes are left untouched.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or ())

    for name, value in list(namespace.items()):
        if name in skip_set or not inspect.isfunction(value):
            continue
        if value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)


__all__ = [
    "LOG_FORMAT",
    "apply_debug_logging",
    "configure_logging",
    "debug_log_call",
]
