"""Price bucketing shared by the volume profile and iceberg detector."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TypeVar

from market_microstructure.models.tape import Trade

T = TypeVar("T")


def round_to_tick(price: Decimal, tick: Decimal) -> Decimal:
    """Snap ``price`` to the nearest multiple of ``tick``.

    Halfway cases round to the even multiple. The result carries the
    tick's exponent (50000 at tick 1.0 gives 50000.0, not 5.0000E+4).
    """
    if tick <= 0:
        raise ValueError(f"tick must be positive, got {tick}")
    ticks = (price / tick).to_integral_value(rounding=ROUND_HALF_EVEN)
    return int(ticks) * tick


def bucket_trades(trades: Iterable[Trade], tick: Decimal) -> dict[Decimal, list[Trade]]:
    """Group trades by bucketed price. Keys are returned in ascending order."""
    buckets: dict[Decimal, list[Trade]] = {}
    for trade in trades:
        buckets.setdefault(round_to_tick(trade.price, tick), []).append(trade)
    return {price: buckets[price] for price in sorted(buckets)}
