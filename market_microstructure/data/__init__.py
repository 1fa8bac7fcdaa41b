"""Loading order book snapshots and trade batches from JSON files."""

from market_microstructure.data.exceptions import SnapshotLoadError
from market_microstructure.data.loader import load_orderbook, load_trades

__all__ = ["SnapshotLoadError", "load_orderbook", "load_trades"]
