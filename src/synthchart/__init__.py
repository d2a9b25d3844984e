"""Synthetic cross-pair candlestick charts."""
