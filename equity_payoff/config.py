"""
Application configuration using Pydantic Settings.
"""

import os
from functools import lru_cache
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings

from equity_payoff.calculations.amortization import DEFAULT_MAX_MONTHS
from equity_payoff.calculations.payoff import PAYOFF_TIMELINES


def get_env_file() -> str:
    """Determine which env file to use based on environment."""
    env = os.getenv("APP_ENV", "development")
    if env == "production":
        return ".env.production"
    return ".env.development"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App settings
    app_name: str = "Negative Equity Payoff Calculator"
    debug: bool = False
    log_level: str = "INFO"
    app_env: str = "development"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Payoff scenarios
    payoff_timelines: List[int] = list(PAYOFF_TIMELINES)
    schedule_max_months: int = DEFAULT_MAX_MONTHS

    @field_validator("payoff_timelines")
    @classmethod
    def timelines_must_be_positive(cls, value: List[int]) -> List[int]:
        """Every payoff timeline must be at least one month."""
        if any(months <= 0 for months in value):
            raise ValueError("payoff timelines must be greater than 0")
        return value

    class Config:
        env_file = get_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
