"""
Pattern kit configuration.

All settings are configurable via environment variables with PATTERN_KIT_ prefix.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_CONSTRUCTION_DELAY_MS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PAYMENT_AMOUNT,
    DEFAULT_SINGLETON_STRATEGY,
    DEFAULT_STRESS_THREADS,
    STRATEGY_DOUBLE_CHECKED,
    STRATEGY_EAGER,
    STRATEGY_LOCKED,
)
from .core.patterns.accessor import DoubleCheckedSingleton

_VALID_STRATEGIES = (STRATEGY_DOUBLE_CHECKED, STRATEGY_LOCKED, STRATEGY_EAGER)


class PatternKitConfig(BaseSettings):
    """Configuration for singleton accessors and the demo runner."""

    model_config = SettingsConfigDict(env_prefix="PATTERN_KIT_", case_sensitive=False)

    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Root logging level for the CLI",
    )
    default_strategy: str = Field(
        default=DEFAULT_SINGLETON_STRATEGY,
        description="Accessor strategy used when none is given",
    )
    stress_threads: int = Field(
        default=DEFAULT_STRESS_THREADS,
        ge=1,
        description="Threads racing for first access in the singleton demo",
    )
    construction_delay_ms: int = Field(
        default=DEFAULT_CONSTRUCTION_DELAY_MS,
        ge=0,
        description="Artificial construction delay that widens the race window",
    )
    payment_amount: float = Field(
        default=DEFAULT_PAYMENT_AMOUNT,
        gt=0,
        description="Amount charged in the payment strategy demo",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("default_strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        if v not in _VALID_STRATEGIES:
            raise ValueError(
                f"default_strategy must be one of {', '.join(_VALID_STRATEGIES)}"
            )
        return v


# Singleton config instance
_config = DoubleCheckedSingleton(PatternKitConfig, name="PatternKitConfig")


def get_config() -> PatternKitConfig:
    """Get the pattern kit config singleton.

    Raises:
        ConstructionError: If the environment holds invalid settings.
    """
    return _config.get_instance()


def reset_config() -> None:
    """Reset the config singleton (for testing)."""
    _config.reset()
