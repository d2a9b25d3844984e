"""Configuration system using pydantic-settings with environment variable loading."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from synthchart.exceptions import UnknownPeriodError
from synthchart.periods import Period, period_from_label


class ChartSettings(BaseSettings):
    """Candlestick chart synthesis parameters."""

    model_config = SettingsConfigDict(env_prefix="CHART_")

    reference_unit: str = "sUSD"  # stable unit every price feed is quoted in
    # Division precision. 36 digits keep all 18 fractional digits of any
    # quotient below 10**18; beyond that the quotient is rounded up.
    decimal_precision: int = Field(default=60, ge=36)
    default_period: Period = Period.ONE_DAY

    @field_validator("default_period", mode="before")
    @classmethod
    def resolve_period(cls, value: object) -> object:
        """Accept enum names ("ONE_DAY") as well as short labels ("1d")."""
        if not isinstance(value, str):
            return value
        try:
            return period_from_label(value)
        except UnknownPeriodError as exc:
            raise ValueError(str(exc)) from exc


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    chart: ChartSettings = ChartSettings()
