"""Microstructure pattern detection: icebergs, spoofing, S/R, absorption.

All detectors are pure and independent: each takes one order book snapshot
or one batch of trades and returns a list of patterns, possibly empty.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from market_microstructure.features.buckets import bucket_trades
from market_microstructure.features.tape import calculate_vwap
from market_microstructure.models.book import BookSide, Level, OrderBook
from market_microstructure.models.patterns import (
    Absorption,
    IcebergOrder,
    Resistance,
    Spoofing,
    Support,
)
from market_microstructure.models.tape import Trade

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)
ICEBERG_SIZE_MULTIPLE = Decimal("1.5")


def detect_iceberg_orders(
    trades: Sequence[Trade],
    min_fills: int,
    price_tolerance: Decimal,
    size_multiple: Decimal = ICEBERG_SIZE_MULTIPLE,
) -> list[IcebergOrder]:
    """Detect potential iceberg orders.

    Trades are bucketed by price (nearest multiple of ``price_tolerance``).
    A bucket with at least ``min_fills`` fills, none larger than
    ``size_multiple`` times the bucket's average fill, is flagged with the
    bucket's total size as the estimated order size.

    Patterns are returned in ascending price order.
    """
    patterns: list[IcebergOrder] = []

    for price, fills in bucket_trades(trades, price_tolerance).items():
        if len(fills) < min_fills:
            continue

        total_size = sum((t.quantity for t in fills), _ZERO)
        avg_size = total_size / len(fills)

        if all(t.quantity <= avg_size * size_multiple for t in fills):
            logger.debug("Iceberg at %s: %d fills, size %s", price, len(fills), total_size)
            patterns.append(IcebergOrder(price=price, estimated_size=total_size))

    return patterns


def _oversized_away_from_top(levels: Sequence[Level], threshold: Decimal) -> list[Level]:
    # Index 0 is the best price; size there is taken as genuine.
    return [level for level in levels[1:] if level.quantity > threshold]


def detect_spoofing(book: OrderBook, threshold: Decimal) -> list[Spoofing]:
    """Flag levels behind the best price whose size exceeds ``threshold``.

    Bids are reported before asks, each side in book order.
    """
    patterns: list[Spoofing] = []

    for level in _oversized_away_from_top(book.bids, threshold):
        patterns.append(Spoofing(price=level.price, side=BookSide.BID))
    for level in _oversized_away_from_top(book.asks, threshold):
        patterns.append(Spoofing(price=level.price, side=BookSide.ASK))

    if patterns:
        logger.debug("Spoofing suspects at %s", [p.price for p in patterns])
    return patterns


def detect_support_resistance(
    book: OrderBook,
    threshold: Decimal,
) -> list[Support | Resistance]:
    """Bid levels with quantity >= threshold are support, ask levels resistance."""
    patterns: list[Support | Resistance] = []

    for bid in book.bids:
        if bid.quantity >= threshold:
            patterns.append(Support(price=bid.price, strength=bid.quantity))

    for ask in book.asks:
        if ask.quantity >= threshold:
            patterns.append(Resistance(price=ask.price, strength=ask.quantity))

    return patterns


def detect_absorption(
    trades: Sequence[Trade],
    volume_threshold: Decimal,
    price_range: Decimal,
) -> list[Absorption]:
    """Detect large volume traded within a narrow price range.

    Looks at the whole batch: if total quantity reaches ``volume_threshold``
    while max - min price stays within ``price_range``, one Absorption at
    the batch VWAP is returned.
    """
    if not trades:
        return []

    total = sum((t.quantity for t in trades), _ZERO)
    low = min(t.price for t in trades)
    high = max(t.price for t in trades)

    if total < volume_threshold or high - low > price_range:
        return []

    vwap = calculate_vwap(trades)
    if vwap is None:
        # Only reachable with a zero volume threshold and zero-size trades.
        return []

    logger.debug("Absorption: %s traded within %s around %s", total, high - low, vwap)
    return [Absorption(price=vwap, volume=total)]
