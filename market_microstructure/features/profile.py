"""Volume profile and volume delta.

The profile buckets traded quantity by price, then derives the Point of
Control (highest-volume bucket) and the Value Area. The value area is
grown by volume rank, highest bucket first, until it covers the target
share of total volume; VAH/VAL are the highest and lowest prices among
the buckets taken. It is not a price-contiguous expansion around the POC.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal

from market_microstructure.features.buckets import round_to_tick
from market_microstructure.models.profile import VolumeProfile
from market_microstructure.models.tape import CVDPoint, Side, Trade

logger = logging.getLogger(__name__)

_ZERO = Decimal(0)
VALUE_AREA_PCT = Decimal("0.70")


def build_volume_profile(
    trades: Sequence[Trade],
    tick_size: Decimal,
    value_area_pct: Decimal = VALUE_AREA_PCT,
) -> VolumeProfile:
    """Build a volume profile from a batch of trades.

    Args:
        trades: Executed trades, any order.
        tick_size: Bucket width; prices snap to the nearest multiple.
        value_area_pct: Share of total volume the value area must cover.

    Returns:
        VolumeProfile with levels ascending by price. On equal volume the
        lower price wins both the POC and the value-area ranking. An empty
        batch gives empty levels and no POC/VAH/VAL.
    """
    volumes: dict[Decimal, Decimal] = {}
    for trade in trades:
        bucket = round_to_tick(trade.price, tick_size)
        volumes[bucket] = volumes.get(bucket, _ZERO) + trade.quantity

    if not volumes:
        return VolumeProfile(levels={})

    levels = {price: volumes[price] for price in sorted(volumes)}

    ranked = sorted(levels.items(), key=lambda item: (-item[1], item[0]))
    poc = ranked[0][0]

    target = sum(levels.values(), _ZERO) * value_area_pct
    accumulated = _ZERO
    high = low = poc
    for price, volume in ranked:
        if accumulated >= target:
            break
        accumulated += volume
        high = max(high, price)
        low = min(low, price)

    logger.debug(
        "Volume profile: %d buckets, POC=%s, VA=[%s, %s]", len(levels), poc, low, high
    )
    return VolumeProfile(levels=levels, poc=poc, vah=high, val=low)


def _signed_quantity(trade: Trade) -> Decimal:
    return trade.quantity if trade.side == Side.BUY else -trade.quantity


def calculate_delta(trades: Sequence[Trade]) -> Decimal:
    """Net buy minus sell volume (positive = buying pressure)."""
    return sum((_signed_quantity(t) for t in trades), _ZERO)


def calculate_cvd(trades: Sequence[Trade]) -> list[CVDPoint]:
    """Cumulative volume delta, one point per trade in input order.

    The last point's delta always equals calculate_delta(trades).
    """
    running = _ZERO
    points: list[CVDPoint] = []
    for trade in trades:
        running += _signed_quantity(trade)
        points.append(CVDPoint(trade.timestamp, running))
    return points
