from __future__ import annotations

import pytest

from resultwise.errors import OutOfRangeError, ValidationError
from resultwise.extensions.sequences import (
    for_each,
    get_by_reverse_index,
    get_by_shifted_reverse_index,
    is_count_zero,
    last_index,
)

pytestmark = pytest.mark.unit

BARS = [10, 11, 12, 13, 14]


def test_is_count_zero() -> None:
    assert is_count_zero([]) is True
    assert is_count_zero({"a": 1}) is False


def test_last_index() -> None:
    assert last_index(BARS) == 4
    assert last_index("x") == 0


def test_last_index_requires_elements() -> None:
    with pytest.raises(ValidationError, match="collection is empty"):
        last_index([])


@pytest.mark.parametrize(("index", "expected"), [(0, 14), (1, 13), (4, 10)])
def test_get_by_reverse_index(index: int, expected: int) -> None:
    assert get_by_reverse_index(BARS, index) == expected


@pytest.mark.parametrize("index", [-1, 5])
def test_get_by_reverse_index_out_of_range(index: int) -> None:
    with pytest.raises(OutOfRangeError) as exc:
        get_by_reverse_index(BARS, index)
    assert exc.value.param_name == "index"


def test_get_by_shifted_reverse_index() -> None:
    assert get_by_shifted_reverse_index(BARS, 0, 0) == 14
    assert get_by_shifted_reverse_index(BARS, 1, 2) == 11
    assert get_by_shifted_reverse_index(BARS, 2, 2) == 10


def test_get_by_shifted_reverse_index_rejects_combined_overflow() -> None:
    with pytest.raises(OutOfRangeError) as exc:
        get_by_shifted_reverse_index(BARS, 3, 2)
    assert exc.value.param_name == "index + shift"


def test_for_each_visits_in_order() -> None:
    seen: list[int] = []
    for_each(iter(BARS), seen.append)
    assert seen == BARS


def test_for_each_rejects_missing_arguments() -> None:
    with pytest.raises(ValidationError):
        for_each(None, print)  # type: ignore[arg-type]
    with pytest.raises(ValidationError):
        for_each(BARS, None)  # type: ignore[arg-type]
