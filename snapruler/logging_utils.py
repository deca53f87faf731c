from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 6
_repr.maxtuple = 6

_MAX_ITEMS = 4


def _summarize(value: Any) -> str:
    """Compact rendering for points, shape lists and candidate arrays."""

    if isinstance(value, np.ndarray):
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"

    if isinstance(value, (list, tuple)) and len(value) > _MAX_ITEMS:
        kinds: dict = {}
        for item in value:
            name = type(item).__name__
            kinds[name] = kinds.get(name, 0) + 1
        counts = ", ".join(f"{name}={count}" for name, count in kinds.items())
        return f"<{type(value).__name__} of {len(value)}: {counts}>"

    if hasattr(value, "points") and isinstance(getattr(value, "points"), list):
        return f"{type(value).__name__}(n={len(value.points)})"

    rendered = _repr.repr(value)
    if len(rendered) > 200:
        return rendered[:200] + "..."
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_summarize(arg) for arg in args]
    parts.extend(f"{key}={_summarize(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that traces calls at DEBUG level."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("-> %s(%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if log_result:
                logger.debug("<- %s = %s", qualname, _summarize(result))
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
    """Wrap the public module-level functions of ``namespace`` with call tracing.

    Private helpers (leading underscore) and classes are left alone so hot
    inner loops stay unwrapped.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or [])

    for attr, value in list(namespace.items()):
        if attr.startswith("_") or attr in skip_set:
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)


__all__ = ["apply_debug_logging", "debug_log_call"]
