"""Settings-driven analysis over one order book snapshot or trade batch."""

from market_microstructure.service.analysis import (
    analyze_orderbook,
    analyze_tape,
    scan_patterns,
)

__all__ = ["analyze_orderbook", "analyze_tape", "scan_patterns"]
