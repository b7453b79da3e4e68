"""Debug-only mirror of :mod:`resultwise.validation.validate`.

Every public function of ``validate`` exists here with the same signature.
Whether the names point at the real checks or at a no-op is decided once,
when this module is imported:

- ``python -O`` (``__debug__`` is false) always binds the no-op;
- otherwise ``RESULTWISE_DEBUG_CHECKS`` (default on) decides.

Call sites never branch per call. Use the module attribute form
(``debug.not_none(...)``) so that :func:`set_enabled` rebinding is visible.
"""

from __future__ import annotations

import logging

from resultwise.config import Config

from . import validate

__all__ = [*validate.__all__, "enabled", "set_enabled"]

logger = logging.getLogger(__name__)

true = validate.true
true_if = validate.true_if
not_none = validate.not_none
not_blank = validate.not_blank
collection_not_empty = validate.collection_not_empty
collection_empty = validate.collection_empty
collection_contains = validate.collection_contains
collection_does_not_contain = validate.collection_does_not_contain
dictionary_contains_key = validate.dictionary_contains_key
dictionary_does_not_contain_key = validate.dictionary_does_not_contain_key
equal_to = validate.equal_to
not_equal_to = validate.not_equal_to
not_invalid_number = validate.not_invalid_number
int_not_out_of_range = validate.int_not_out_of_range
float_not_out_of_range = validate.float_not_out_of_range
decimal_not_out_of_range = validate.decimal_not_out_of_range

_enabled = True


def _skip(*_args: object, **_kwargs: object) -> None:
    return None


def _bind(*, checks: bool) -> None:
    global _enabled
    namespace = globals()
    for name in validate.__all__:
        namespace[name] = getattr(validate, name) if checks else _skip
    _enabled = checks
    logger.debug("Debug checks %s", "bound" if checks else "disabled")


def enabled() -> bool:
    """Return True when the debug names are bound to the real checks."""
    return _enabled


def set_enabled(flag: bool) -> None:
    """Rebind every debug check to the real validator (True) or a no-op (False)."""
    _bind(checks=bool(flag))


_bind(checks=__debug__ and Config.from_env().debug_checks)
