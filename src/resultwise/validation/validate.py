"""Precondition checks that always run.

Each function returns ``None`` when its condition holds and raises
``ValidationError`` (``OutOfRangeError`` for numeric ranges) otherwise. The
message names the parameter and the violated condition::

    validate.not_none(order, "order")
    validate.int_not_out_of_range(index, "index", 0, last, RangeEndPoints.INCLUSIVE)
"""

from __future__ import annotations

from decimal import Decimal
import math
import typing

from resultwise.constants import VALIDATION_FAILED_FORMAT
from resultwise.errors import OutOfRangeError, ValidationError

from .range_end_points import RangeEndPoints

if typing.TYPE_CHECKING:
    from collections.abc import Collection, Container, Mapping

__all__ = [
    "collection_contains",
    "collection_does_not_contain",
    "collection_empty",
    "collection_not_empty",
    "decimal_not_out_of_range",
    "dictionary_contains_key",
    "dictionary_does_not_contain_key",
    "equal_to",
    "float_not_out_of_range",
    "int_not_out_of_range",
    "not_blank",
    "not_equal_to",
    "not_invalid_number",
    "not_none",
    "true",
    "true_if",
]


def _message(detail: str) -> str:
    return VALIDATION_FAILED_FORMAT.format(detail=detail)


def _require(*, condition: bool, detail: str, param_name: str) -> None:
    """Raise ValidationError with parameter context when ``condition`` is false."""
    if not condition:
        raise ValidationError(_message(detail), param_name=param_name)


def true(predicate: bool, param_name: str) -> None:
    _require(
        condition=predicate,
        detail=f"The predicate based on {param_name} is false",
        param_name=param_name,
    )


def true_if(condition: bool, predicate: bool, param_name: str) -> None:
    """Check ``predicate`` only when ``condition`` holds."""
    _require(
        condition=not condition or predicate,
        detail=f"The conditional predicate based on {param_name} is false",
        param_name=param_name,
    )


def not_none(argument: object, param_name: str) -> None:
    _require(
        condition=argument is not None,
        detail=f"The {param_name} argument is null",
        param_name=param_name,
    )


def not_blank(argument: str | None, param_name: str) -> None:
    """Reject ``None``, empty and whitespace-only strings."""
    _require(
        condition=isinstance(argument, str) and bool(argument.strip()),
        detail=f"The {param_name} string argument is null or white space",
        param_name=param_name,
    )


def collection_not_empty(collection: Collection[typing.Any] | None, param_name: str) -> None:
    _require(
        condition=collection is not None,
        detail=f"The {param_name} collection is null",
        param_name=param_name,
    )
    _require(
        condition=len(collection) != 0,  # type: ignore[arg-type]
        detail=f"The {param_name} collection is empty",
        param_name=param_name,
    )


def collection_empty(collection: Collection[typing.Any] | None, param_name: str) -> None:
    _require(
        condition=collection is not None,
        detail=f"The {param_name} collection is null",
        param_name=param_name,
    )
    _require(
        condition=len(collection) == 0,  # type: ignore[arg-type]
        detail=f"The {param_name} collection is not empty",
        param_name=param_name,
    )


def collection_contains(
    element: object, param_name: str, collection: Container[typing.Any]
) -> None:
    _require(
        condition=element in collection,
        detail=f"The collection does not contain the {param_name} element",
        param_name=param_name,
    )


def collection_does_not_contain(
    element: object, param_name: str, collection: Container[typing.Any]
) -> None:
    _require(
        condition=element not in collection,
        detail=f"The collection already contains the {param_name} element",
        param_name=param_name,
    )


def dictionary_contains_key(
    key: object, param_name: str, dictionary: Mapping[typing.Any, typing.Any]
) -> None:
    _require(
        condition=key in dictionary,
        detail=f"The dictionary does not contain the {param_name} key",
        param_name=param_name,
    )


def dictionary_does_not_contain_key(
    key: object, param_name: str, dictionary: Mapping[typing.Any, typing.Any]
) -> None:
    _require(
        condition=key not in dictionary,
        detail=f"The dictionary already contains the {param_name} key",
        param_name=param_name,
    )


def equal_to(obj: object, param_name: str, obj_to_equal: object) -> None:
    _require(
        condition=obj == obj_to_equal,
        detail=f"The {param_name} should be equal to {obj_to_equal}. Value = {obj}",
        param_name=param_name,
    )


def not_equal_to(obj: object, param_name: str, obj_not_to_equal: object) -> None:
    _require(
        condition=obj != obj_not_to_equal,
        detail=f"The {param_name} should not be equal to {obj_not_to_equal}. Value = {obj}",
        param_name=param_name,
    )


# --- Numeric checks ---


def _is_invalid_number(value: float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan() or value.is_infinite()
    return math.isnan(value) or math.isinf(value)


def not_invalid_number(value: float | Decimal, param_name: str) -> None:
    """Reject NaN and positive or negative infinity."""
    if _is_invalid_number(value):
        raise OutOfRangeError(
            _message(f"The {param_name} is an invalid number"),
            param_name=param_name,
            value=value,
        )


def _check_range(
    value: typing.Any,
    param_name: str,
    lower: typing.Any,
    upper: typing.Any,
    end_points: RangeEndPoints,
) -> None:
    if not end_points.contains(value, lower, upper):
        interval = end_points.notation(lower, upper)
        raise OutOfRangeError(
            _message(
                f"The {param_name} is not within the specified range {interval}. "
                f"Value = {value}"
            ),
            param_name=param_name,
            value=value,
            lower=lower,
            upper=upper,
            end_points=end_points,
        )


def int_not_out_of_range(
    value: int,
    param_name: str,
    lower: int,
    upper: int,
    end_points: RangeEndPoints = RangeEndPoints.INCLUSIVE,
) -> None:
    _check_range(value, param_name, lower, upper, end_points)


def float_not_out_of_range(
    value: float,
    param_name: str,
    lower: float,
    upper: float,
    end_points: RangeEndPoints = RangeEndPoints.INCLUSIVE,
) -> None:
    """Range check for floats; NaN and infinite values or bounds are rejected."""
    not_invalid_number(value, param_name)
    not_invalid_number(lower, "lower")
    not_invalid_number(upper, "upper")
    _check_range(value, param_name, lower, upper, end_points)


def decimal_not_out_of_range(
    value: Decimal,
    param_name: str,
    lower: Decimal,
    upper: Decimal,
    end_points: RangeEndPoints = RangeEndPoints.INCLUSIVE,
) -> None:
    """Range check for decimals; NaN and infinite values or bounds are rejected."""
    not_invalid_number(value, param_name)
    not_invalid_number(lower, "lower")
    not_invalid_number(upper, "upper")
    _check_range(value, param_name, lower, upper, end_points)
