"""Custom exceptions for the synthetic pair chart library.

The synthesizer itself never raises for missing or partial data; these
cover the parsing and lookup seams around it.
"""


class SynthChartError(Exception):
    """Base exception for all chart library errors."""


class InvalidCandleRecordError(SynthChartError):
    """Raised when a price-history record cannot be parsed into a Candle."""


class UnknownPeriodError(SynthChartError):
    """Raised when a chart period label does not match any known period."""
