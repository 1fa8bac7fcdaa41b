"""Pure metric and pattern computation over order books and trade batches."""

from market_microstructure.features.buckets import round_to_tick
from market_microstructure.features.orderbook import (
    best_ask,
    best_bid,
    calculate_imbalance,
    calculate_spread,
    mid_price,
    total_volume,
    weighted_mid_price,
)
from market_microstructure.features.tape import (
    calculate_aggression_ratio,
    calculate_trade_pressure,
    calculate_vwap,
    classify_trade,
    detect_trade_clusters,
    identify_block_trades,
)
from market_microstructure.features.profile import (
    build_volume_profile,
    calculate_cvd,
    calculate_delta,
)
from market_microstructure.features.patterns import (
    detect_absorption,
    detect_iceberg_orders,
    detect_spoofing,
    detect_support_resistance,
)

__all__ = [
    "best_ask",
    "best_bid",
    "build_volume_profile",
    "calculate_aggression_ratio",
    "calculate_cvd",
    "calculate_delta",
    "calculate_imbalance",
    "calculate_spread",
    "calculate_trade_pressure",
    "calculate_vwap",
    "classify_trade",
    "detect_absorption",
    "detect_iceberg_orders",
    "detect_spoofing",
    "detect_support_resistance",
    "detect_trade_clusters",
    "identify_block_trades",
    "mid_price",
    "round_to_tick",
    "total_volume",
    "weighted_mid_price",
]
