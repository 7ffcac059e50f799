# settings.py
"""
Calculator settings and logging setup.

The numeric format convention (tolerance, rounding, scientific-notation
thresholds, decimal separator) lives in a single immutable pydantic model that
is passed explicitly to the parser, the engine and the formatter. Nothing reads
the host locale.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalculatorSettings(BaseModel):
    """Numeric format convention and logging level for a calculator session."""
    model_config = ConfigDict(frozen=True)

    tolerance: float = Field(1e-10, gt=0, description="Magnitude treated as effectively zero")
    decimal_places: int = Field(10, ge=0, le=15, description="Rounding applied to plain results")
    scientific_digits: int = Field(6, ge=0, le=15, description="Mantissa digits in scientific notation")
    large_threshold: float = Field(1e12, gt=0, description="Results at or above this use scientific notation")
    small_threshold: float = Field(1e-6, gt=0, description="Non-zero results below this use scientific notation")
    decimal_separator: str = "."
    log_level: str = "WARNING"

    @field_validator('decimal_separator')
    @classmethod
    def separator_must_be_single_symbol(cls, v: str) -> str:
        if len(v) != 1 or v.isdigit() or v in "+-eE" or v.isspace():
            raise ValueError('Decimal separator must be a single non-digit symbol')
        return v

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode='after')
    def thresholds_must_be_ordered(self) -> "CalculatorSettings":
        if self.small_threshold >= self.large_threshold:
            raise ValueError('small_threshold must be below large_threshold')
        return self


DEFAULT_SETTINGS = CalculatorSettings()


def configure_logging(settings: CalculatorSettings = DEFAULT_SETTINGS) -> None:
    """Configure root logging to stderr at the level named in the settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
