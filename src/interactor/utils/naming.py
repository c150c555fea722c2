"""Readable names for callables, used in log lines and error messages."""

from collections.abc import Callable
from typing import Any


def callable_name(fn: Callable[..., Any]) -> str:
    """Return a human-readable name for ``fn``.

    Plain functions and classes use their ``__qualname__``; ``functools.partial``
    objects fall back to the wrapped function; anything else uses ``repr``.
    """
    if hasattr(fn, "__qualname__"):
        return fn.__qualname__
    if hasattr(fn, "func") and hasattr(fn.func, "__qualname__"):
        return fn.func.__qualname__
    return repr(fn)
