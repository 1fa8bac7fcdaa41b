"""Composite analysis: runs the pure metric functions with configured thresholds.

Free functions, no state between calls. Thresholds come from ``Settings``
(``get_settings()`` unless one is passed in).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from market_microstructure.config import Settings, TapeSettings, get_settings
from market_microstructure.features.orderbook import (
    best_ask,
    best_bid,
    calculate_imbalance,
    calculate_spread,
    mid_price,
    total_volume,
    weighted_mid_price,
)
from market_microstructure.features.patterns import (
    detect_absorption,
    detect_iceberg_orders,
    detect_spoofing,
    detect_support_resistance,
)
from market_microstructure.features.profile import (
    build_volume_profile,
    calculate_cvd,
    calculate_delta,
)
from market_microstructure.features.tape import (
    calculate_aggression_ratio,
    calculate_trade_pressure,
    calculate_vwap,
    detect_trade_clusters,
    identify_block_trades,
)
from market_microstructure.models.analysis import (
    AggressionBias,
    OrderBookAnalysis,
    TapeAnalysis,
)
from market_microstructure.models.book import OrderBook
from market_microstructure.models.patterns import Pattern
from market_microstructure.models.tape import Trade

logger = logging.getLogger(__name__)


def analyze_orderbook(book: OrderBook, settings: Settings | None = None) -> OrderBookAnalysis:
    """Spread, mid prices, depth and imbalance for one snapshot."""
    cfg = (settings or get_settings()).orderbook

    spread = calculate_spread(book)
    return OrderBookAnalysis(
        timestamp=book.timestamp,
        best_bid=best_bid(book),
        best_ask=best_ask(book),
        spread=spread[0] if spread else None,
        spread_pct=spread[1] if spread else None,
        mid_price=mid_price(book),
        weighted_mid_price=weighted_mid_price(book),
        imbalance=calculate_imbalance(book, cfg.imbalance_depth),
        imbalance_depth=cfg.imbalance_depth,
        bid_depth=total_volume(book.bids, cfg.imbalance_depth),
        ask_depth=total_volume(book.asks, cfg.imbalance_depth),
    )


def _aggression_bias(ratio: Decimal, cfg: TapeSettings) -> AggressionBias:
    if ratio > cfg.aggressive_buy_ratio:
        return AggressionBias.BUYERS
    if ratio < cfg.aggressive_sell_ratio:
        return AggressionBias.SELLERS
    return AggressionBias.BALANCED


def analyze_tape(trades: Sequence[Trade], settings: Settings | None = None) -> TapeAnalysis:
    """Pressure, aggression, VWAP, delta, blocks, clusters and profile for one batch."""
    settings = settings or get_settings()
    cfg = settings.tape

    pressure = calculate_trade_pressure(trades)
    ratio = calculate_aggression_ratio(trades)
    vwap = calculate_vwap(trades)
    last_price = trades[-1].price if trades else None

    distance_pct: Decimal | None = None
    if vwap is not None and last_price is not None and vwap != 0:
        distance_pct = abs(last_price - vwap) / vwap * 100

    cvd = calculate_cvd(trades)

    return TapeAnalysis(
        trade_count=len(trades),
        buy_volume=pressure.buy_volume,
        sell_volume=pressure.sell_volume,
        net_volume=pressure.net_volume,
        aggression_ratio=ratio,
        aggression_bias=_aggression_bias(ratio, cfg),
        vwap=vwap,
        last_price=last_price,
        vwap_distance_pct=distance_pct,
        delta=calculate_delta(trades),
        final_cvd=cvd[-1].delta if cvd else None,
        block_trades=identify_block_trades(trades, cfg.block_threshold),
        cluster_starts=detect_trade_clusters(
            trades, cfg.cluster_time_window, cfg.min_cluster_size
        ),
        volume_profile=build_volume_profile(
            trades, settings.profile.tick_size, settings.profile.value_area_pct
        ),
    )


def scan_patterns(
    book: OrderBook | None = None,
    trades: Sequence[Trade] | None = None,
    settings: Settings | None = None,
) -> list[Pattern]:
    """Run every detector whose input is given.

    Order: iceberg, absorption (trades), then spoofing, support/resistance (book).
    """
    cfg = (settings or get_settings()).patterns
    patterns: list[Pattern] = []

    if trades is not None:
        patterns.extend(detect_iceberg_orders(
            trades,
            cfg.iceberg_min_fills,
            cfg.iceberg_price_tolerance,
            cfg.iceberg_size_multiple,
        ))
        patterns.extend(detect_absorption(
            trades, cfg.absorption_volume_threshold, cfg.absorption_price_range
        ))

    if book is not None:
        patterns.extend(detect_spoofing(book, cfg.spoofing_threshold))
        patterns.extend(detect_support_resistance(book, cfg.support_resistance_threshold))

    logger.info("Pattern scan found %d pattern(s)", len(patterns))
    return patterns
