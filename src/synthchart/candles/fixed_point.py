"""Fixed-point (18 decimal) encoding for candle prices.

Raw candles carry prices as scaled integers. Decoding and re-encoding are
exact at any size: only the division between prices is rounded to the
context precision, and it rounds toward +infinity so the final ceiling
step to scaled integers is never undone. The upward bias is part of the
chart contract.

CRITICAL: Never route prices through float.
"""

import math
from decimal import ROUND_CEILING, Context, Decimal, Overflow

from synthchart.models import Candle, Price, WorkingCandle

WAD_DECIMALS = 18
WAD = 10**WAD_DECIMALS

#: Significant digits kept by price division. A quotient keeps all 18
#: fractional digits while its integer part fits in the remaining digits.
DEFAULT_PRECISION = 60


def make_context(precision: int = DEFAULT_PRECISION) -> Context:
    """Build the division context: ceiling rounding, x/0 -> Infinity, 0/0 -> NaN.

    DivisionByZero and InvalidOperation are left untrapped so a zero price
    propagates as a non-finite value instead of raising.
    """
    return Context(prec=precision, rounding=ROUND_CEILING, traps=[Overflow])


def to_decimal(value: int) -> Decimal:
    """Decode a scaled integer into its literal Decimal value, exactly."""
    return Decimal(f"{value}E-{WAD_DECIMALS}")


def from_decimal(value: Decimal) -> Price:
    """Encode a Decimal as a scaled integer, rounding toward +infinity.

    Non-finite values (Infinity, NaN) have no integer form and are returned
    unchanged for the display layer to detect.
    """
    if not value.is_finite():
        return value
    sign, digits, exponent = value.as_tuple()
    return math.ceil(Decimal((sign, digits, exponent + WAD_DECIMALS)))


def to_working_candle(candle: Candle, is_base: bool = False) -> WorkingCandle:
    return WorkingCandle(
        id=candle.id,
        asset=candle.asset,
        open=to_decimal(candle.open),
        high=to_decimal(candle.high),
        low=to_decimal(candle.low),
        close=to_decimal(candle.close),
        timestamp=candle.timestamp,
        is_base=is_base,
    )


def from_working_candle(candle: WorkingCandle) -> Candle:
    """Drop the series tag and re-encode prices as scaled integers."""
    return Candle(
        id=candle.id,
        asset=candle.asset,
        open=from_decimal(candle.open),
        high=from_decimal(candle.high),
        low=from_decimal(candle.low),
        close=from_decimal(candle.close),
        timestamp=candle.timestamp,
    )
