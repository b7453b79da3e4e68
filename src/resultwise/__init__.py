"""resultwise: result and option values with a validation toolkit.

Public API:
    - Command (alias Result): success or failure with no payload
    - Query: success with a value, or failure with an error
    - Option: presence or absence of a value
    - validate / debug: precondition checks (``debug`` can be switched off)
    - RangeEndPoints: endpoint modes for numeric range checks
"""

from __future__ import annotations

import logging

from resultwise.command import Command, Result
from resultwise.config import Config
from resultwise.errors import (
    ConfigurationError,
    InvalidStateError,
    OutOfRangeError,
    ResultwiseError,
    ValidationError,
)
from resultwise.option import Option
from resultwise.query import Query
from resultwise.validation import RangeEndPoints, debug, validate

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultwise")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultwise").addHandler(logging.NullHandler())

__all__ = [
    "Command",
    "Config",
    "ConfigurationError",
    "InvalidStateError",
    "Option",
    "OutOfRangeError",
    "Query",
    "RangeEndPoints",
    "Result",
    "ResultwiseError",
    "ValidationError",
    "__version__",
    "debug",
    "validate",
]
