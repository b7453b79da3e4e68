"""String helpers."""

from __future__ import annotations

from enum import Enum

from resultwise.constants import VALIDATION_FAILED_FORMAT
from resultwise.errors import ValidationError
from resultwise.validation import validate


def remove_all_whitespace(text: str) -> str:
    validate.not_none(text, "text")
    return "".join(c for c in text if not c.isspace())


def to_enum[E: Enum](text: str | None, enum_type: type[E]) -> E:
    """Parse ``text`` as a member name of ``enum_type``.

    Blank input yields the enum's first (default) member.

    Raises:
        ValidationError: If ``text`` names no member of ``enum_type``.
    """
    validate.not_none(enum_type, "enum_type")
    validate.collection_not_empty(list(enum_type), "enum_type")
    if text is None or not text.strip():
        return next(iter(enum_type))
    try:
        return enum_type[text.strip()]
    except KeyError:
        names = ", ".join(member.name for member in enum_type)
        raise ValidationError(
            VALIDATION_FAILED_FORMAT.format(
                detail=f"{text!r} is not a member of {enum_type.__name__}"
            ),
            param_name="text",
            hint=f"Expected one of: {names}",
        ) from None
