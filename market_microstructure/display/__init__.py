"""Text rendering of books, tapes, profiles and patterns."""

from market_microstructure.display.text import (
    ascii_depth_chart,
    format_orderbook,
    format_patterns,
    format_trades,
    format_volume_profile,
)

__all__ = [
    "ascii_depth_chart",
    "format_orderbook",
    "format_patterns",
    "format_trades",
    "format_volume_profile",
]
