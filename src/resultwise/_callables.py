"""Internal helpers for inspecting caller-supplied callables."""

from __future__ import annotations

import inspect
import typing

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def accepts_argument(func: typing.Callable[..., typing.Any]) -> bool:
    """Return True when ``func`` can be called with one positional argument.

    Used to tell ``lambda: ...`` handlers from ``lambda error: ...`` handlers.
    Callables whose signature cannot be introspected are assumed to accept it.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    return any(p.kind in _POSITIONAL for p in sig.parameters.values())
