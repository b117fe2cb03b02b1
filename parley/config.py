"""Configuration settings for coalition bidding.

Uses Pydantic Settings for validation and environment variable support.
All settings can be overridden via PARLEY_* environment variables.
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BiddingConfig(BaseSettings):
    """Default parameters for the coalition bidding strategy."""

    # Strategy parameters (clamped to [0, 1] by the strategy, not here)
    base_strength: float = 0.5
    coalition_boost: float = 0.3

    # Logging
    log_level: LogLevel = "WARNING"

    model_config = {"env_prefix": "PARLEY_"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
