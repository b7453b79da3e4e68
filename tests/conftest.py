"""Pytest configuration and fixtures.

Provides environment isolation and a guard that restores the debug-check
binding after each test. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

from resultwise.validation import debug

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_resultwise_env(monkeypatch):
    """Clear RESULTWISE_* variables so a developer's shell cannot leak in."""
    for key in list(os.environ.keys()):
        if key.startswith("RESULTWISE_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def restore_debug_binding():
    """Put the debug checks back the way the test found them."""
    was_enabled = debug.enabled()
    yield
    debug.set_enabled(was_enabled)


# =============================================================================
# Shared Fixtures (opt-in)
# =============================================================================


@pytest.fixture
def debug_checks_on():
    """Force the debug checks to the real validators for one test."""
    debug.set_enabled(True)


@pytest.fixture
def debug_checks_off():
    """Force the debug checks to no-ops for one test."""
    debug.set_enabled(False)
