"""Tests for pydantic-settings configuration loading."""

import pytest
from pydantic import ValidationError

from synthchart.config import AppSettings, ChartSettings
from synthchart.periods import Period


class TestChartSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("CHART_REFERENCE_UNIT", "CHART_DECIMAL_PRECISION", "CHART_DEFAULT_PERIOD"):
            monkeypatch.delenv(name, raising=False)
        settings = ChartSettings()
        assert settings.reference_unit == "sUSD"
        assert settings.decimal_precision == 60
        assert settings.default_period is Period.ONE_DAY

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHART_REFERENCE_UNIT", "USDC")
        monkeypatch.setenv("CHART_DECIMAL_PRECISION", "80")
        monkeypatch.setenv("CHART_DEFAULT_PERIOD", "4h")
        settings = ChartSettings()
        assert settings.reference_unit == "USDC"
        assert settings.decimal_precision == 80
        assert settings.default_period is Period.FOUR_HOURS

    @pytest.mark.parametrize("label", ["ONE_WEEK", "1W", Period.ONE_WEEK])
    def test_default_period_accepts_name_or_label(self, label: str) -> None:
        assert ChartSettings(default_period=label).default_period is Period.ONE_WEEK

    def test_unknown_default_period_rejected_at_load(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CHART_DEFAULT_PERIOD", "2D")
        with pytest.raises(ValidationError, match="2D"):
            ChartSettings()

    @pytest.mark.parametrize("precision", [10, 19, 35])
    def test_precision_below_minimum_rejected(self, precision: int) -> None:
        with pytest.raises(ValidationError):
            ChartSettings(decimal_precision=precision)

    def test_minimum_precision_accepted(self) -> None:
        assert ChartSettings(decimal_precision=36).decimal_precision == 36


class TestAppSettings:
    def test_composes_chart_settings(self, mock_settings: AppSettings) -> None:
        assert mock_settings.log_level == "DEBUG"
        assert mock_settings.log_format == "console"
        assert mock_settings.chart.reference_unit == "sUSD"
