"""Shared data models for synthetic pair candlestick charts.

CRITICAL: Prices are scaled integers (18 decimals) or Decimal. Never use float.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from synthchart.exceptions import InvalidCandleRecordError

#: A raw price is a scaled integer. A synthesized price may instead hold the
#: non-finite Decimal produced by dividing by a zero price.
Price = int | Decimal


class QueryStatus(str, Enum):
    """Lifecycle state of a price-history query."""

    IDLE = "idle"  # no asset selected, query never issued
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Candle:
    """One OHLC bar for a single asset (or a synthesized pair).

    Price fields are fixed-point integers with 18 decimals: the literal price
    is the integer divided by 10**18.
    """

    id: str | None
    asset: str | None
    open: Price
    high: Price
    low: Price
    close: Price
    timestamp: int

    @property
    def prices(self) -> tuple[Price, Price, Price, Price]:
        return (self.open, self.high, self.low, self.close)

    @property
    def is_finite(self) -> bool:
        """True when every price is a plain scaled integer."""
        return all(isinstance(p, int) for p in self.prices)


@dataclass(frozen=True)
class WorkingCandle:
    """Candle with Decimal prices, tagged with the series it came from.

    Only lives for the duration of one merge pass.
    """

    id: str | None
    asset: str | None
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    timestamp: int
    is_base: bool = False


@dataclass
class CandleQueryResult:
    """Result of a price-history query for one asset and period."""

    status: QueryStatus
    candles: list[Candle] = field(default_factory=list)

    @property
    def data(self) -> list[Candle]:
        """Candles usable for charting; empty unless the query succeeded."""
        return self.candles if self.status == QueryStatus.SUCCESS else []

    @property
    def no_data(self) -> bool:
        """Query finished successfully but returned zero candles."""
        return self.status == QueryStatus.SUCCESS and not self.candles

    @property
    def is_loading(self) -> bool:
        return self.status == QueryStatus.LOADING


@dataclass
class CombinedChartData:
    """Synthesized pair candles plus display flags for the chart layer."""

    candles: list[Candle]
    no_data: bool
    is_loading: bool

    @property
    def has_non_finite(self) -> bool:
        return any(not c.is_finite for c in self.candles)


def _parse_int(record: Mapping[str, Any], key: str) -> int:
    if key not in record:
        raise InvalidCandleRecordError(f"Candle record missing field '{key}'")
    value = record[key]
    if isinstance(value, bool):
        raise InvalidCandleRecordError(f"Candle field '{key}' is not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise InvalidCandleRecordError(f"Candle field '{key}' is not an integer: {value!r}")
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise InvalidCandleRecordError(
            f"Candle field '{key}' is not an integer: {value!r}"
        ) from exc


def candle_from_record(record: Mapping[str, Any]) -> Candle:
    """Parse a price-history provider record into a Candle.

    Providers report prices as scaled-integer strings (subgraph BigInt) or
    ints, and name the asset either ``synth`` or ``asset``. Values are not
    range-checked.

    Raises:
        InvalidCandleRecordError: A required field is missing or not integral.
    """
    asset = record.get("synth", record.get("asset"))
    record_id = record.get("id")
    return Candle(
        id=str(record_id) if record_id is not None else None,
        asset=str(asset) if asset is not None else None,
        open=_parse_int(record, "open"),
        high=_parse_int(record, "high"),
        low=_parse_int(record, "low"),
        close=_parse_int(record, "close"),
        timestamp=_parse_int(record, "timestamp"),
    )
