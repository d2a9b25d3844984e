"""Synthetic cross-pair candlestick synthesis.

Both input series are priced in the same reference unit but sampled
independently. Every observation from either leg becomes one output bar:
a base bar is divided by the last seen quote bar, a quote bar divides the
last seen base bar. No timestamp alignment or interpolation is attempted,
so the output is never empty when both legs have data.

CRITICAL: All division uses Decimal under an explicit context. Never use float.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from decimal import Context, Decimal
from operator import attrgetter

from synthchart.candles.fixed_point import (
    DEFAULT_PRECISION,
    from_decimal,
    from_working_candle,
    make_context,
    to_working_candle,
)
from synthchart.models import Candle, WorkingCandle


@dataclass(frozen=True)
class _MergeCursors:
    """Last seen bar of each leg during the time-ordered walk."""

    prev_base: WorkingCandle
    prev_quote: WorkingCandle


def _divide_prices(
    numerator: WorkingCandle, denominator: WorkingCandle, context: Context
) -> tuple[Decimal, Decimal, Decimal, Decimal]:
    """Divide OHLC field-by-field (open/open, high/high, low/low, close/close)."""
    return (
        context.divide(numerator.open, denominator.open),
        context.divide(numerator.high, denominator.high),
        context.divide(numerator.low, denominator.low),
        context.divide(numerator.close, denominator.close),
    )


def _advance(
    cursors: _MergeCursors, candle: WorkingCandle, context: Context
) -> tuple[_MergeCursors, tuple[Decimal, Decimal, Decimal, Decimal]]:
    """Fold step: price one observation and move the matching cursor."""
    if candle.is_base:
        prices = _divide_prices(candle, cursors.prev_quote, context)
        return replace(cursors, prev_base=candle), prices
    prices = _divide_prices(cursors.prev_base, candle, context)
    return replace(cursors, prev_quote=candle), prices


def _pass_through(series: Sequence[Candle]) -> list[Candle]:
    return [from_working_candle(to_working_candle(c)) for c in series]


def combine_data_to_pair(
    base_series: Sequence[Candle],
    quote_series: Sequence[Candle],
    base_is_reference_unit: bool,
    quote_is_reference_unit: bool,
    *,
    precision: int = DEFAULT_PRECISION,
) -> list[Candle]:
    """Synthesize the direct base/quote OHLC series from two reference-unit series.

    Degenerate cases, checked in order:
    1. Base is the reference unit: the quote series is returned after a
       fixed-point round trip (no inversion).
    2. Quote is the reference unit: same, using the base series.
    3. Either series is empty: returns [].

    Otherwise both series are tagged, merged, stably sorted by timestamp
    (base bars ahead of quote bars on ties) and walked once. Cursors start
    at the first element of each input series. Output length is
    ``len(base_series) + len(quote_series)``.

    A zero price in a denominator yields Infinity (or NaN for 0/0) in the
    affected field rather than raising; see ``Candle.is_finite``.

    Args:
        base_series: Base asset candles, any order.
        quote_series: Quote asset candles, any order.
        base_is_reference_unit: Base asset is the stable reference unit.
        quote_is_reference_unit: Quote asset is the stable reference unit.
        precision: Significant digits kept by each division, rounded up.

    Returns:
        Synthesized candles sorted ascending by timestamp, or [].
    """
    context = make_context(precision)

    if base_is_reference_unit:
        return _pass_through(quote_series)
    if quote_is_reference_unit:
        return _pass_through(base_series)
    if not base_series or not quote_series:
        return []

    base_candles = [to_working_candle(c, is_base=True) for c in base_series]
    quote_candles = [to_working_candle(c, is_base=False) for c in quote_series]
    merged = sorted(base_candles + quote_candles, key=attrgetter("timestamp"))

    pair_asset = f"{base_series[0].asset}/{quote_series[0].asset}"
    cursors = _MergeCursors(prev_base=base_candles[0], prev_quote=quote_candles[0])
    result: list[Candle] = []
    for candle in merged:
        cursors, (open_, high, low, close) = _advance(cursors, candle, context)
        result.append(
            Candle(
                id=candle.id,
                asset=pair_asset,
                open=from_decimal(open_),
                high=from_decimal(high),
                low=from_decimal(low),
                close=from_decimal(close),
                timestamp=candle.timestamp,
            )
        )

    return result
