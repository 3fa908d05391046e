"""Shared pytest fixtures for plurality tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from plurality.core.environment import RULES_ENV_VAR
from plurality.core.inflector import Inflector
from plurality.core.strings import set_default_inflector


@pytest.fixture(autouse=True)
def isolated_default_inflector(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a fresh process-wide inflector without a rules file."""
    monkeypatch.delenv(RULES_ENV_VAR, raising=False)
    set_default_inflector(None)
    yield
    set_default_inflector(None)


@pytest.fixture
def inflector() -> Inflector:
    """Return an inflector seeded with the default rules."""
    return Inflector()


@pytest.fixture
def empty_inflector() -> Inflector:
    """Return an inflector with no rules at all."""
    return Inflector(seed=False)
