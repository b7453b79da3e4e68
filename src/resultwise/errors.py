"""Exception hierarchy for resultwise.

Only programmer errors are raised. Domain failures travel as
``Command.fail``/``Query.fail`` values and never appear here.
"""

from __future__ import annotations

from typing import Any


class ResultwiseError(Exception):
    """Base exception for all resultwise errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ResultwiseError):
    """Environment configuration could not be resolved."""


class ValidationError(ResultwiseError, ValueError):
    """An argument failed a precondition check.

    ``param_name`` names the offending argument so callers can report it
    without parsing the message.
    """

    def __init__(
        self,
        message: str,
        *,
        param_name: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.param_name = param_name


class OutOfRangeError(ValidationError):
    """A numeric argument fell outside its permitted range."""

    def __init__(
        self,
        message: str,
        *,
        param_name: str | None = None,
        value: Any = None,
        lower: Any = None,
        upper: Any = None,
        end_points: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, param_name=param_name, hint=hint)
        self.value = value
        self.lower = lower
        self.upper = upper
        self.end_points = end_points


class InvalidStateError(ResultwiseError):
    """A value or error was read from the wrong variant of a result or option."""
