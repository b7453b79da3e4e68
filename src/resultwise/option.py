"""Option: an explicit present-or-absent value.

``Option.some(x)`` wraps a non-``None`` value; ``Option.none()`` is empty.
Options compare structurally with each other and with raw values::

    Option.some(3) == Option.some(3)   # True
    Option.some(3) == 3                # True
    Option.none() == Option.none()     # True
    Option.none() == 3                 # False
"""

from __future__ import annotations

from dataclasses import dataclass
import typing
from typing import TYPE_CHECKING, final

from resultwise.constants import NO_VALUE_SENTINEL
from resultwise.errors import InvalidStateError
from resultwise.validation import validate

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultwise.query import Query


@final
@dataclass(frozen=True, slots=True, eq=False)
class Option[T]:
    """Presence or absence of a value of type ``T``."""

    _value: T | None = None

    # --- Construction ---

    @classmethod
    def none(cls) -> Option[T]:
        return cls()

    @classmethod
    def some(cls, value: T) -> Option[T]:
        """Wrap ``value``; ``None`` is rejected (use :meth:`of` for nullable input)."""
        validate.not_none(value, "value")
        return cls(value)

    @classmethod
    def of(cls, value: T | None) -> Option[T]:
        """Wrap a possibly-``None`` value: ``None`` becomes an empty option."""
        return cls(value)

    # --- Inspection ---

    @property
    def has_value(self) -> bool:
        return self._value is not None

    @property
    def has_no_value(self) -> bool:
        return self._value is None

    @property
    def value(self) -> T:
        """The wrapped value.

        Raises:
            InvalidStateError: If the option is empty.
        """
        if self._value is None:
            raise InvalidStateError("There is no value for an empty option.")
        return self._value

    # --- Extraction and transformation ---

    def to_query(self, error: str) -> Query[T]:
        """Convert to a query that fails with ``error`` when empty."""
        from resultwise.query import Query

        validate.not_blank(error, "error")
        if self._value is None:
            return Query.fail(error)
        return Query.ok(self._value)

    def unwrap(self, default: T | None = None) -> T | None:
        return default if self._value is None else self._value

    def unwrap_with[K](self, selector: Callable[[T], K], default: K | None = None) -> K | None:
        """Return ``selector(value)`` when present, else ``default``."""
        validate.not_none(selector, "selector")
        return default if self._value is None else selector(self._value)

    def where(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only when ``predicate`` holds for it."""
        validate.not_none(predicate, "predicate")
        if self._value is None or not predicate(self._value):
            return Option()
        return self

    def select[K](self, selector: Callable[[T], K | Option[K] | None]) -> Option[K]:
        """Map the value through ``selector``.

        A selector returning an ``Option`` is flattened; one returning ``None``
        yields an empty option.
        """
        validate.not_none(selector, "selector")
        if self._value is None:
            return Option()
        selected = selector(self._value)
        if isinstance(selected, Option):
            return typing.cast("Option[K]", selected)
        return Option.of(selected)

    def execute(self, action: Callable[[T], object]) -> None:
        """Run ``action(value)`` when a value is present."""
        validate.not_none(action, "action")
        if self._value is not None:
            action(self._value)

    # --- Equality and rendering ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Option):
            if self._value is None or other._value is None:
                return self._value is None and other._value is None
            return bool(self._value == other._value)
        if self._value is None or other is None:
            return False
        return bool(self._value == other)

    def __hash__(self) -> int:
        return 0 if self._value is None else hash(self._value)

    def __str__(self) -> str:
        return NO_VALUE_SENTINEL if self._value is None else str(self._value)

    def __repr__(self) -> str:
        return "Option.none()" if self._value is None else f"Option.some({self._value!r})"
