"""Configuration: frozen Config resolved from ``RESULTWISE_*`` variables."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

from resultwise.constants import DEBUG_CHECKS_VAR
from resultwise.errors import ConfigurationError

load_dotenv()

logger = logging.getLogger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def _coerce_bool(name: str, raw: str | None, *, default: bool) -> bool:
    """Convert an environment string to bool using common conventions."""
    if raw is None or not raw.strip():
        return default
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {raw!r}",
        hint=f"Set {name} to one of: 1, true, yes, on, 0, false, no, off.",
    )


@dataclass(frozen=True)
class Config:
    """Immutable library configuration.

    Example:
        config = Config.from_env()
        # RESULTWISE_DEBUG_CHECKS=0 turns debug.* into no-ops at import
    """

    #: Bind ``validation.debug`` to the real checks. Ignored under ``python -O``.
    debug_checks: bool = True

    @classmethod
    def from_env(cls) -> Config:
        """Resolve configuration from the environment (a local ``.env`` included)."""
        config = cls(
            debug_checks=_coerce_bool(
                DEBUG_CHECKS_VAR, os.environ.get(DEBUG_CHECKS_VAR), default=True
            ),
        )
        logger.debug("Resolved %s", config)
        return config

    def __str__(self) -> str:
        return f"Config(debug_checks={self.debug_checks})"

    __repr__ = __str__
