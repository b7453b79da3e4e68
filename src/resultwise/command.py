"""Command: the result of an operation that returns no value.

A ``Command`` is either a success or a failure carrying an error string.
Failures are values, not exceptions; chain them with the combinator methods
and inspect them at the edge of the program::

    outcome = (
        Command.ok()
        .ensure(lambda: account.is_open, "Account is closed")
        .on_success(account.flush)
        .on_failure(lambda error: logger.warning("flush skipped: %s", error))
    )
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import typing
from typing import TYPE_CHECKING, final

from resultwise._callables import accepts_argument
from resultwise.constants import (
    COMMAND_FAILURE_FORMAT,
    DEFAULT_COMBINE_SEPARATOR,
    DEFAULT_SUCCESS_MESSAGE,
)
from resultwise.errors import InvalidStateError
from resultwise.validation import debug, validate

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultwise.query import Query

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True, slots=True)
class Command:
    """Success or failure of an operation with no return value.

    Construct with :meth:`ok` or :meth:`fail`; the dataclass constructor is
    an implementation detail.
    """

    _error: str | None = None
    _success_message: str = DEFAULT_SUCCESS_MESSAGE

    def __post_init__(self) -> None:
        debug.true(self._error is None or bool(self._error.strip()), "error")

    # --- Construction ---

    @classmethod
    def ok(cls, message: str | None = None) -> Command:
        """Return a success, optionally with a descriptive message."""
        if message is None:
            return _OK
        validate.not_blank(message, "message")
        return cls(_success_message=message)

    @classmethod
    def fail(cls, error: str) -> Command:
        """Return a failure carrying ``error`` verbatim."""
        validate.not_blank(error, "error")
        return cls(_error=error)

    @staticmethod
    def first_failure_or_success(*results: Command | Query[typing.Any]) -> Command:
        """Return the first failure among ``results``, else a success.

        ``Query`` results are accepted and narrowed. An empty call succeeds.
        """
        for index, result in enumerate(results):
            _require_result(result, index)
            if result.is_failure:
                return result if isinstance(result, Command) else result.to_command()
        return _OK

    @staticmethod
    def combine(
        *results: Command | Query[typing.Any],
        separator: str = DEFAULT_COMBINE_SEPARATOR,
    ) -> Command:
        """Join the errors of every failure in ``results`` into one failure.

        Errors keep their input order. Returns a success when nothing failed.
        """
        validate.not_none(separator, "separator")
        errors: list[str] = []
        for index, result in enumerate(results):
            _require_result(result, index)
            if result.is_failure:
                errors.append(result.error)
        if not errors:
            return _OK
        logger.debug("Combined %d failures out of %d results", len(errors), len(results))
        return Command.fail(separator.join(errors))

    # --- Inspection ---

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> str:
        """The failure's error string.

        Raises:
            InvalidStateError: If this command succeeded.
        """
        if self._error is None:
            raise InvalidStateError("There is no error message for success.")
        return self._error

    @property
    def message(self) -> str:
        """Human-readable summary: the success message or a formatted failure."""
        if self._error is None:
            return self._success_message
        return COMMAND_FAILURE_FORMAT.format(error=self._error)

    # --- Combinators ---

    def on_success(self, fn: Callable[[], object]) -> Command:
        """Run ``fn`` on success.

        A ``Command`` returned by ``fn`` becomes the result; any other return
        value is ignored and this command is returned.
        """
        validate.not_none(fn, "fn")
        if self.is_failure:
            return self
        outcome = fn()
        return outcome if isinstance(outcome, Command) else self

    def then[T](self, fn: Callable[[], Query[T]]) -> Query[T]:
        """Continue with a query-producing step; failures become ``Query.fail``."""
        from resultwise.query import Query

        validate.not_none(fn, "fn")
        if self._error is not None:
            return Query.fail(self._error)
        return fn()

    def map[T](self, fn: Callable[[], T]) -> Query[T]:
        """Wrap ``fn()`` in a successful query; failures become ``Query.fail``."""
        from resultwise.query import Query

        validate.not_none(fn, "fn")
        if self._error is not None:
            return Query.fail(self._error)
        return Query.ok(fn())

    def on_failure(self, fn: Callable[[str], object] | Callable[[], object]) -> Command:
        """Run ``fn`` on failure, passing the error when ``fn`` takes an argument."""
        validate.not_none(fn, "fn")
        if self._error is not None:
            if accepts_argument(fn):
                typing.cast("Callable[[str], object]", fn)(self._error)
            else:
                typing.cast("Callable[[], object]", fn)()
        return self

    def on_both[K](self, fn: Callable[[Command], K]) -> K:
        validate.not_none(fn, "fn")
        return fn(self)

    def ensure(self, predicate: Callable[[], bool], error: str) -> Command:
        """Fail with ``error`` when ``predicate()`` is false; failures pass through."""
        validate.not_none(predicate, "predicate")
        validate.not_blank(error, "error")
        if self.is_failure:
            return self
        if not predicate():
            return Command.fail(error)
        return self

    def __repr__(self) -> str:
        if self._error is None:
            if self._success_message != DEFAULT_SUCCESS_MESSAGE:
                return f"Command.ok({self._success_message!r})"
            return "Command.ok()"
        return f"Command.fail({self._error!r})"


def _require_result(result: object, index: int) -> None:
    from resultwise.query import Query

    param_name = f"results[{index}]"
    validate.not_none(result, param_name)
    validate.true(isinstance(result, (Command, Query)), param_name)


_OK = Command()

Result = Command
"""Alias: the non-generic result type is a ``Command``."""
