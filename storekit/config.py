"""Configuration loading for storekit.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Mapping fields are read from
    JSON, e.g. EXCHANGE_RATES='{"USD": 1.0, "EUR": 0.92}'.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Currency configuration
    base_currency: str = Field(
        default="USD",
        description="Currency that store prices are expressed in",
    )
    exchange_rates: dict[str, float] = Field(
        default_factory=lambda: {"USD": 1.0, "EUR": 0.92, "GBP": 0.79, "AUD": 1.5},
        description="Units of each currency per one unit of the reference currency",
    )

    # Shipping configuration
    shipping_rates: dict[str, float] = Field(
        default_factory=lambda: {"US": 10.0, "CA": 15.0, "UK": 25.0},
        description="Flat shipping cost per destination country code",
    )
    shipping_days: int = Field(
        default=2,
        description="Estimated delivery time in days",
    )

    # Store hours and promotions
    opening_hour: int = Field(
        default=8,
        description="Hour (inclusive) the store comes online",
    )
    closing_hour: int = Field(
        default=20,
        description="Hour (exclusive) the store goes offline",
    )
    christmas_discount: float = Field(
        default=0.2,
        description="Discount fraction applied on December 25",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("base_currency")
    @classmethod
    def validate_base_currency(cls, v: str) -> str:
        """Normalize the base currency code."""
        if not v.strip():
            raise ValueError("base_currency must be non-empty")
        return v.strip().upper()

    @field_validator("exchange_rates")
    @classmethod
    def validate_exchange_rates(cls, v: dict[str, float]) -> dict[str, float]:
        """Ensure every exchange rate is positive."""
        for code, rate in v.items():
            if rate <= 0:
                raise ValueError(f"exchange rate for {code} must be positive")
        return v

    @field_validator("shipping_rates")
    @classmethod
    def validate_shipping_rates(cls, v: dict[str, float]) -> dict[str, float]:
        """Ensure shipping costs are non-negative."""
        for destination, cost in v.items():
            if cost < 0:
                raise ValueError(f"shipping cost for {destination} must be non-negative")
        return v

    @field_validator("shipping_days")
    @classmethod
    def validate_shipping_days(cls, v: int) -> int:
        if v < 0:
            raise ValueError("shipping_days must be non-negative")
        return v

    @field_validator("opening_hour", "closing_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Ensure store hours fall within a day."""
        if v < 0 or v > 24:
            raise ValueError("store hours must be between 0 and 24")
        return v

    @field_validator("christmas_discount")
    @classmethod
    def validate_christmas_discount(cls, v: float) -> float:
        """Ensure the discount is a fraction below 1."""
        if v < 0 or v >= 1:
            raise ValueError("christmas_discount must be in [0, 1)")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
