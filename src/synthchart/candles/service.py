"""Combined candlestick chart data for a synthetic trading pair.

Queries the price history of both legs concurrently, derives the chart's
"no data" and "loading" flags, and synthesizes the direct pair series.
A leg that is the reference unit never blocks the chart: its flags are
ignored because its price is constant by definition.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod

from synthchart.candles.synthesizer import combine_data_to_pair
from synthchart.config import AppSettings, ChartSettings
from synthchart.logging import chart_log_context, get_logger, setup_logging
from synthchart.models import CandleQueryResult, CombinedChartData, QueryStatus
from synthchart.periods import Period, period_from_label

logger = get_logger(__name__)


class CandleProvider(ABC):
    """Abstract price-history source, one query per asset and period."""

    @abstractmethod
    async def fetch_candles(self, asset: str, period: Period) -> CandleQueryResult:
        """Return the reference-unit-denominated candles for an asset."""
        ...


class CombinedCandleService:
    """Builds pair chart data from two single-asset candle queries.

    Args:
        provider: Price-history source for individual assets.
        settings: Reference unit, division precision and default period.
    """

    def __init__(self, provider: CandleProvider, settings: ChartSettings) -> None:
        self._provider = provider
        self._settings = settings

    async def _query(self, asset: str | None, period: Period) -> CandleQueryResult:
        if asset is None:
            return CandleQueryResult(status=QueryStatus.IDLE)
        return await self._provider.fetch_candles(asset, period)

    async def get_chart_data(
        self,
        base_asset: str | None,
        quote_asset: str | None,
        period: Period | str | None = None,
    ) -> CombinedChartData:
        """Fetch both legs and synthesize the base/quote candle series.

        Args:
            base_asset: Base currency key, or None when not selected.
            quote_asset: Quote currency key, or None when not selected.
            period: Chart period or its label. Defaults to the configured period.

        Returns:
            CombinedChartData with synthesized candles and display flags.

        Raises:
            UnknownPeriodError: ``period`` is a label that matches no period.
        """
        resolved = period_from_label(period or self._settings.default_period)
        reference_unit = self._settings.reference_unit
        base_is_reference_unit = base_asset == reference_unit
        quote_is_reference_unit = quote_asset == reference_unit

        with chart_log_context(
            base_asset=base_asset,
            quote_asset=quote_asset,
            period=resolved.value,
        ):
            base, quote = await asyncio.gather(
                self._query(base_asset, resolved),
                self._query(quote_asset, resolved),
            )

            candles = combine_data_to_pair(
                base.data,
                quote.data,
                base_is_reference_unit,
                quote_is_reference_unit,
                precision=self._settings.decimal_precision,
            )
            chart = CombinedChartData(
                candles=candles,
                no_data=(base.no_data and not base_is_reference_unit)
                or (quote.no_data and not quote_is_reference_unit),
                is_loading=(base.is_loading and not base_is_reference_unit)
                or (quote.is_loading and not quote_is_reference_unit),
            )

            if chart.has_non_finite:
                logger.warning(
                    "pair_candles_non_finite",
                    candle_count=len(candles),
                    non_finite_count=sum(1 for c in candles if not c.is_finite),
                )
            else:
                logger.debug(
                    "pair_candles_synthesized",
                    base_count=len(base.data),
                    quote_count=len(quote.data),
                    candle_count=len(candles),
                    no_data=chart.no_data,
                    is_loading=chart.is_loading,
                )
        return chart


def create_chart_service(
    provider: CandleProvider, settings: AppSettings | None = None
) -> CombinedCandleService:
    """Load settings, configure logging, and build the chart service.

    Args:
        provider: Price-history source for individual assets.
        settings: Application settings. None loads them from the environment.
    """
    settings = settings or AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "chart_service_created",
        reference_unit=settings.chart.reference_unit,
        decimal_precision=settings.chart.decimal_precision,
        default_period=settings.chart.default_period.value,
    )
    return CombinedCandleService(provider, settings.chart)
