"""Configuration for Kova

Environment-driven defaults via pydantic-settings (``KOVA_`` prefix, optional
``.env`` file) plus the per-call ``ValidationConfig`` record.

Usage:
    from kova.config import ValidationConfig, fixed_clock, get_settings

    config = ValidationConfig(fail_fast=True, clock=fixed_clock(instant))
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from functools import lru_cache
from typing import TYPE_CHECKING, Callable

from pydantic import field_validator
from pydantic_settings import BaseSettings

if TYPE_CHECKING:
    from kova.validation.log import LogEntry


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class KovaSettings(BaseSettings):
    # Validation
    fail_fast: bool = False
    locale: str = "en"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # True for structured JSON output, False for coloured console

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        if (level := value.upper()) not in LOG_LEVELS: raise ValueError(f"unknown log level: {value}")
        return level

    class Config:
        env_prefix = "KOVA_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> KovaSettings:
    return KovaSettings()


def system_clock() -> datetime: return datetime.now().astimezone()


def fixed_clock(instant: datetime) -> Callable[[], datetime]:
    """Clock that always reports ``instant`` (deterministic temporal checks)."""
    return lambda: instant


@dataclass(frozen=True, slots=True)
class ValidationConfig:
    """Options recognised by a single top-level validation call.

    - fail_fast: stop evaluating siblings after the first violation in a scope
    - clock: time source for temporal constraints
    - logger: receives one LogEntry per constraint evaluation
    """
    fail_fast: bool = field(default_factory=lambda: get_settings().fail_fast)
    clock: Callable[[], datetime] = system_clock
    logger: Callable[[LogEntry], None] | None = None

    def with_options(self, **changes) -> ValidationConfig: return replace(self, **changes)
