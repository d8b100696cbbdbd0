"""Pytest configuration and fixtures.

Provides environment isolation and a call-counting step double. Fixtures
here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import os
from typing import Any

import pytest

from popcorn.config import default_config

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CountingStep:
    """Step function double that records every call.

    Returns ``result(value)`` when a factory is given, else ``value`` as-is.
    """

    result: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, value: Any) -> Any:
        self.calls.append(value)
        if self.result is None:
            return value
        return self.result(value)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting_step() -> type[CountingStep]:
    """Return the CountingStep class so tests can build configured doubles."""
    return CountingStep


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_popcorn_env(request, monkeypatch):
    """Clear POPCORN_* env vars and the cached default Config for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("POPCORN_"):
                monkeypatch.delenv(key, raising=False)
    default_config.cache_clear()
    yield
    default_config.cache_clear()
