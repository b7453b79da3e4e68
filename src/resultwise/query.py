"""Query: the result of an operation that returns a value.

A ``Query[T]`` is either a success holding a non-``None`` value or a failure
holding an error string. Reading ``value`` from a failure (or ``error`` from
a success) is a programmer error and raises ``InvalidStateError``.
"""

from __future__ import annotations

from dataclasses import dataclass
import typing
from typing import TYPE_CHECKING, final

from resultwise._callables import accepts_argument
from resultwise.constants import DEFAULT_SUCCESS_MESSAGE, QUERY_FAILURE_FORMAT
from resultwise.errors import InvalidStateError
from resultwise.validation import debug, validate

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultwise.command import Command


@final
@dataclass(frozen=True, slots=True)
class Query[T]:
    """Success with a value, or failure with an error.

    Construct with :meth:`ok` or :meth:`fail`.
    """

    _value: T | None = None
    _error: str | None = None
    _success_message: str = DEFAULT_SUCCESS_MESSAGE

    def __post_init__(self) -> None:
        debug.true((self._value is None) != (self._error is None), "value")

    # --- Construction ---

    @classmethod
    def ok(cls, value: T, message: str | None = None) -> Query[T]:
        """Return a success holding ``value`` (which cannot be ``None``)."""
        validate.not_none(value, "value")
        if message is None:
            return cls(_value=value)
        validate.not_blank(message, "message")
        return cls(_value=value, _success_message=message)

    @classmethod
    def fail(cls, error: str) -> Query[T]:
        """Return a failure carrying ``error`` verbatim."""
        validate.not_blank(error, "error")
        return cls(_error=error)

    # --- Inspection ---

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        """The success value.

        Raises:
            InvalidStateError: If this query failed.
        """
        if self._error is not None:
            raise InvalidStateError("There is no value for failure.")
        return typing.cast("T", self._value)

    @property
    def error(self) -> str:
        """The failure's error string.

        Raises:
            InvalidStateError: If this query succeeded.
        """
        if self._error is None:
            raise InvalidStateError("There is no error message for success.")
        return self._error

    @property
    def message(self) -> str:
        if self._error is None:
            return self._success_message
        return QUERY_FAILURE_FORMAT.format(error=self._error)

    def value_or(self, default: T) -> T:
        """Return the value on success, ``default`` on failure."""
        if self._error is not None:
            return default
        return typing.cast("T", self._value)

    def to_command(self) -> Command:
        """Drop the value: success becomes ``Command.ok()``, the error is kept verbatim."""
        from resultwise.command import Command

        if self._error is not None:
            return Command.fail(self._error)
        return Command.ok()

    # --- Combinators ---

    def on_success(self, fn: Callable[[T], object]) -> Query[typing.Any] | Command:
        """Run ``fn(value)`` on success.

        A ``Query`` or ``Command`` returned by ``fn`` becomes the result; any
        other return value is ignored and this query is returned.
        """
        from resultwise.command import Command

        validate.not_none(fn, "fn")
        if self._error is not None:
            return self
        outcome = fn(typing.cast("T", self._value))
        return outcome if isinstance(outcome, (Query, Command)) else self

    def then[K](self, fn: Callable[[T], Query[K]]) -> Query[K]:
        """Continue with ``fn(value)``; failures propagate unchanged."""
        validate.not_none(fn, "fn")
        if self._error is not None:
            return typing.cast("Query[K]", self)
        return fn(typing.cast("T", self._value))

    def map[K](self, fn: Callable[[T], K]) -> Query[K]:
        """Wrap ``fn(value)`` in a new success; failures propagate unchanged."""
        validate.not_none(fn, "fn")
        if self._error is not None:
            return typing.cast("Query[K]", self)
        return Query.ok(fn(typing.cast("T", self._value)))

    def on_failure(self, fn: Callable[[str], object] | Callable[[], object]) -> Query[T]:
        """Run ``fn`` on failure, passing the error when ``fn`` takes an argument."""
        validate.not_none(fn, "fn")
        if self._error is not None:
            if accepts_argument(fn):
                typing.cast("Callable[[str], object]", fn)(self._error)
            else:
                typing.cast("Callable[[], object]", fn)()
        return self

    def on_both[K](self, fn: Callable[[Query[T]], K]) -> K:
        validate.not_none(fn, "fn")
        return fn(self)

    def ensure(self, predicate: Callable[[T], bool], error: str) -> Query[T]:
        """Fail with ``error`` when ``predicate(value)`` is false; failures pass through."""
        validate.not_none(predicate, "predicate")
        validate.not_blank(error, "error")
        if self._error is not None:
            return self
        if not predicate(typing.cast("T", self._value)):
            return Query.fail(error)
        return self

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Query.fail({self._error!r})"
        return f"Query.ok({self._value!r})"
