"""Shared pytest fixtures for validation tests."""

from collections.abc import Generator
from datetime import datetime

import pytest

from kova.config import ValidationConfig, fixed_clock, get_settings
from kova.validation import LogEntry, set_locale, set_lookup


@pytest.fixture(autouse=True)
def english_locale() -> Generator[None, None, None]:
    """Pin the ambient locale and default lookup for each test."""
    set_locale("en")
    yield
    set_locale(None)
    set_lookup(None)


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so environment changes are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def entries() -> list[LogEntry]:
    return []


@pytest.fixture
def logged(entries: list[LogEntry]) -> ValidationConfig:
    """Config whose logger records every LogEntry into ``entries``."""
    return ValidationConfig(fail_fast=False, logger=entries.append)


@pytest.fixture
def fail_fast() -> ValidationConfig:
    return ValidationConfig(fail_fast=True)


@pytest.fixture
def noon() -> ValidationConfig:
    """Config whose clock is pinned to 2024-01-01 12:00 (naive)."""
    return ValidationConfig(fail_fast=False, clock=fixed_clock(datetime(2024, 1, 1, 12, 0)))
