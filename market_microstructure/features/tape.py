"""Tape reading: trade classification, pressure, aggression, clusters, VWAP."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from market_microstructure.models.tape import (
    Side,
    Trade,
    TradeClass,
    TradeKind,
    TradePressure,
)

_ZERO = Decimal(0)
_NEUTRAL_AGGRESSION = Decimal("0.5")


def classify_trade(trade: Trade, block_threshold: Decimal) -> TradeClass:
    """Classify a trade as buy, sell, or block (quantity >= threshold)."""
    if trade.quantity >= block_threshold:
        return TradeClass(kind=TradeKind.BLOCK, side=trade.side)
    if trade.side == Side.BUY:
        return TradeClass(kind=TradeKind.BUY, side=Side.BUY)
    return TradeClass(kind=TradeKind.SELL, side=Side.SELL)


def calculate_trade_pressure(trades: Sequence[Trade]) -> TradePressure:
    """Buy volume, sell volume and their difference."""
    buy_volume = sum((t.quantity for t in trades if t.side == Side.BUY), _ZERO)
    sell_volume = sum((t.quantity for t in trades if t.side == Side.SELL), _ZERO)
    return TradePressure(buy_volume, sell_volume, buy_volume - sell_volume)


def identify_block_trades(trades: Sequence[Trade], threshold: Decimal) -> list[Trade]:
    """Trades with quantity >= threshold, in input order."""
    return [t for t in trades if t.quantity >= threshold]


def calculate_aggression_ratio(trades: Sequence[Trade]) -> Decimal:
    """Share of trades that were aggressive buys, in [0, 1].

    An empty batch is reported as neutral (0.5) rather than measured.
    """
    if not trades:
        return _NEUTRAL_AGGRESSION

    buy_count = sum(1 for t in trades if t.side == Side.BUY)
    return Decimal(buy_count) / Decimal(len(trades))


def detect_trade_clusters(
    trades: Sequence[Trade],
    time_window: int,
    min_cluster_size: int,
) -> list[int]:
    """Start indices of runs of trades in rapid succession.

    A run continues while each gap between neighbouring timestamps is
    <= ``time_window``; it is reported when it holds at least
    ``min_cluster_size`` trades. Trades must be sorted by timestamp.
    """
    if not trades:
        return []

    clusters: list[int] = []
    start = 0
    count = 1

    for i in range(1, len(trades)):
        if trades[i].timestamp - trades[i - 1].timestamp <= time_window:
            count += 1
            continue
        if count >= min_cluster_size:
            clusters.append(start)
        start = i
        count = 1

    # Final run
    if count >= min_cluster_size:
        clusters.append(start)

    return clusters


def calculate_vwap(trades: Sequence[Trade]) -> Decimal | None:
    """Volume-weighted average price, or None without volume."""
    if not trades:
        return None

    total_value = sum((t.price * t.quantity for t in trades), _ZERO)
    volume = sum((t.quantity for t in trades), _ZERO)
    if volume == _ZERO:
        return None
    return total_value / volume
