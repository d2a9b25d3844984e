"""Candlestick synthesis for synthetic cross pairs.

Provides fixed-point price encoding, the pair synthesizer, and the service
that feeds the synthesizer from a price-history provider.
"""

from synthchart.candles.fixed_point import WAD, from_decimal, to_decimal
from synthchart.candles.service import (
    CandleProvider,
    CombinedCandleService,
    create_chart_service,
)
from synthchart.candles.synthesizer import combine_data_to_pair

__all__ = [
    "WAD",
    "CandleProvider",
    "CombinedCandleService",
    "combine_data_to_pair",
    "create_chart_service",
    "from_decimal",
    "to_decimal",
]
