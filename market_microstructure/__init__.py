"""Market microstructure analytics: order book metrics, tape reading, volume profile, patterns."""

# Config
from market_microstructure.config import Settings, get_settings, load_settings, reset_settings

# Models
from market_microstructure.models.book import BookSide, Level, OrderBook
from market_microstructure.models.tape import (
    CVDPoint,
    Side,
    Trade,
    TradeClass,
    TradeKind,
    TradePressure,
)
from market_microstructure.models.profile import VolumeProfile
from market_microstructure.models.patterns import (
    Absorption,
    IcebergOrder,
    Pattern,
    PatternKind,
    Resistance,
    Spoofing,
    Support,
)
from market_microstructure.models.analysis import AggressionBias, OrderBookAnalysis, TapeAnalysis

# Engine
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

# Analysis and loading
from market_microstructure.service.analysis import analyze_orderbook, analyze_tape, scan_patterns
from market_microstructure.data import SnapshotLoadError, load_orderbook, load_trades
