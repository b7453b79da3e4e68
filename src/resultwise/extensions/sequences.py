"""Indexing helpers for sized sequences.

Reverse indices count back from the last element: index ``0`` is the last
element, ``1`` the one before it, and so on.
"""

from __future__ import annotations

import typing

from resultwise.validation import validate

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence, Sized


def is_count_zero(collection: Sized) -> bool:
    return len(collection) == 0


def last_index(sequence: Sequence[typing.Any]) -> int:
    """Return the index of the last element of a non-empty sequence."""
    validate.collection_not_empty(sequence, "sequence")
    return len(sequence) - 1


def get_by_reverse_index[T](sequence: Sequence[T], index: int) -> T:
    """Return the element ``index`` places before the last one."""
    last = last_index(sequence)
    validate.int_not_out_of_range(index, "index", 0, last)
    return sequence[last - index]


def get_by_shifted_reverse_index[T](sequence: Sequence[T], index: int, shift: int) -> T:
    """Like :func:`get_by_reverse_index`, moved a further ``shift`` places back."""
    last = last_index(sequence)
    validate.int_not_out_of_range(index, "index", 0, last)
    validate.int_not_out_of_range(shift, "shift", 0, last)
    validate.int_not_out_of_range(index + shift, "index + shift", 0, last)
    return sequence[last - index - shift]


def for_each[T](source: Iterable[T], action: Callable[[T], object]) -> None:
    validate.not_none(source, "source")
    validate.not_none(action, "action")
    for element in source:
        action(element)
