"""Order book metrics: best prices, spread, mid prices, depth and imbalance.

Pure functions: every call takes a complete OrderBook snapshot and returns
a value; nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from market_microstructure.models.book import Level, OrderBook

_ZERO = Decimal(0)
_HUNDRED = Decimal(100)


def best_bid(book: OrderBook) -> Decimal | None:
    """Price of the first bid level, or None if there are no bids."""
    return book.bids[0].price if book.bids else None


def best_ask(book: OrderBook) -> Decimal | None:
    """Price of the first ask level, or None if there are no asks."""
    return book.asks[0].price if book.asks else None


def calculate_spread(book: OrderBook) -> tuple[Decimal, Decimal] | None:
    """Bid-ask spread as ``(spread, spread_pct)``.

    ``spread_pct`` is the spread relative to the best bid, in percent.
    Returns None if either side is empty or the best bid is zero.
    """
    if not book.bids or not book.asks:
        return None

    bid = book.bids[0].price
    ask = book.asks[0].price
    if bid == _ZERO:
        return None
    spread = ask - bid
    spread_pct = spread / bid * _HUNDRED
    return spread, spread_pct


def total_volume(levels: Sequence[Level], depth: int | None = None) -> Decimal:
    """Sum of quantities over the first ``depth`` levels (all if None)."""
    if depth is not None and depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    return sum((level.quantity for level in levels[:depth]), _ZERO)


def calculate_imbalance(book: OrderBook, depth: int | None = None) -> Decimal:
    """Order book imbalance in [-1, 1].

    (bid_volume - ask_volume) / (bid_volume + ask_volume) over the first
    ``depth`` levels of each side. Positive means more resting buy volume.
    Returns 0 when both sides sum to zero.
    """
    bid_volume = total_volume(book.bids, depth)
    ask_volume = total_volume(book.asks, depth)

    total = bid_volume + ask_volume
    if total == _ZERO:
        return _ZERO
    return (bid_volume - ask_volume) / total


def mid_price(book: OrderBook) -> Decimal | None:
    bid = best_bid(book)
    ask = best_ask(book)
    if bid is None or ask is None:
        return None
    return (bid + ask) / 2


def weighted_mid_price(book: OrderBook) -> Decimal | None:
    """Mid price with each best price weighted by the opposite side's size.

    (bid.price * ask.qty + ask.price * bid.qty) / (bid.qty + ask.qty), which
    leans toward the side with less resting size. None if either side is
    empty or the combined top-of-book quantity is zero.
    """
    if not book.bids or not book.asks:
        return None

    bid = book.bids[0]
    ask = book.asks[0]
    total_qty = bid.quantity + ask.quantity
    if total_qty == _ZERO:
        return None

    return (bid.price * ask.quantity + ask.price * bid.quantity) / total_qty
