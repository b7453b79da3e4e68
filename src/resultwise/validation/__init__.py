"""Validation toolkit.

``validate`` holds precondition checks that always run; ``debug`` mirrors
them and can be switched off wholesale (``python -O`` or
``RESULTWISE_DEBUG_CHECKS=0``).
"""

from . import debug, validate
from .range_end_points import RangeEndPoints

__all__ = ["RangeEndPoints", "debug", "validate"]
