"""Generic helpers built on the validation toolkit.

- ``sequences``: reverse indexing and iteration helpers
- ``decimals``: decimal places and tick sizes
- ``strings``: whitespace stripping and enum parsing
"""

from . import decimals, sequences, strings
from .decimals import decimal_places, to_tick_size
from .sequences import (
    for_each,
    get_by_reverse_index,
    get_by_shifted_reverse_index,
    is_count_zero,
    last_index,
)
from .strings import remove_all_whitespace, to_enum

__all__ = [
    "decimal_places",
    "decimals",
    "for_each",
    "get_by_reverse_index",
    "get_by_shifted_reverse_index",
    "is_count_zero",
    "last_index",
    "remove_all_whitespace",
    "sequences",
    "strings",
    "to_enum",
    "to_tick_size",
]
