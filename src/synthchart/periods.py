"""Chart period labels and their candle bucket widths."""

from enum import Enum

from synthchart.exceptions import UnknownPeriodError


class Period(str, Enum):
    """Selectable chart period. Value is the short label shown on the chart."""

    ONE_HOUR = "1H"
    FOUR_HOURS = "4H"
    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"

    @property
    def seconds(self) -> int:
        """Candle bucket width requested from the price-history provider."""
        return _PERIOD_SECONDS[self]

    @property
    def i18n_label(self) -> str:
        return f"common.chart-periods.{self.value}"


_PERIOD_SECONDS: dict[Period, int] = {
    Period.ONE_HOUR: 60 * 60,
    Period.FOUR_HOURS: 4 * 60 * 60,
    Period.ONE_DAY: 24 * 60 * 60,
    Period.ONE_WEEK: 7 * 24 * 60 * 60,
    Period.ONE_MONTH: 30 * 24 * 60 * 60,
}


def period_from_label(label: str | Period) -> Period:
    """Resolve a period by enum name ("ONE_DAY") or short label ("1d").

    Raises:
        UnknownPeriodError: The label matches no period.
    """
    if isinstance(label, Period):
        return label
    key = label.strip().upper()
    for period in Period:
        if key in (period.name, period.value):
            return period
    raise UnknownPeriodError(f"Unknown chart period: {label!r}")
