"""Shared test fixtures for the synthetic pair chart library."""

import pytest

from synthchart.config import AppSettings, ChartSettings


@pytest.fixture
def chart_settings() -> ChartSettings:
    """Chart settings with explicit test defaults (sUSD reference unit)."""
    return ChartSettings(
        reference_unit="sUSD",
        decimal_precision=60,
        default_period="ONE_DAY",
    )


@pytest.fixture
def mock_settings(chart_settings: ChartSettings) -> AppSettings:
    """Return AppSettings with test defaults."""
    return AppSettings(log_level="DEBUG", chart=chart_settings)
