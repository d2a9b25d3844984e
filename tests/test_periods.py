"""Tests for chart period labels."""

import pytest

from synthchart.periods import Period, period_from_label
from synthchart.exceptions import UnknownPeriodError


class TestPeriod:
    def test_seconds(self) -> None:
        assert Period.ONE_HOUR.seconds == 3600
        assert Period.FOUR_HOURS.seconds == 14_400
        assert Period.ONE_DAY.seconds == 86_400
        assert Period.ONE_WEEK.seconds == 604_800
        assert Period.ONE_MONTH.seconds == 2_592_000

    def test_i18n_label(self) -> None:
        assert Period.ONE_DAY.i18n_label == "common.chart-periods.1D"


class TestPeriodFromLabel:
    @pytest.mark.parametrize(
        ("label", "expected"),
        [
            ("ONE_DAY", Period.ONE_DAY),
            ("one_week", Period.ONE_WEEK),
            ("4h", Period.FOUR_HOURS),
            (" 1M ", Period.ONE_MONTH),
        ],
    )
    def test_resolves_name_or_short_label(self, label: str, expected: Period) -> None:
        assert period_from_label(label) is expected

    def test_period_passes_through(self) -> None:
        assert period_from_label(Period.ONE_HOUR) is Period.ONE_HOUR

    def test_unknown_label_raises(self) -> None:
        with pytest.raises(UnknownPeriodError, match="THREE_DAYS"):
            period_from_label("THREE_DAYS")
