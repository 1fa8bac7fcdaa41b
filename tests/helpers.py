"""Builders for order books and trades from string literals."""

from decimal import Decimal

from market_microstructure.models.book import Level, OrderBook
from market_microstructure.models.tape import Side, Trade


def D(value: str) -> Decimal:
    return Decimal(value)


def make_book(
    bids: list[tuple[str, str]],
    asks: list[tuple[str, str]],
    timestamp: int = 1000,
) -> OrderBook:
    """Build an OrderBook from (price, quantity) string pairs."""
    return OrderBook(
        bids=[Level(price=D(p), quantity=D(q)) for p, q in bids],
        asks=[Level(price=D(p), quantity=D(q)) for p, q in asks],
        timestamp=timestamp,
    )


def make_trades(rows: list[tuple[str, str, str, int]]) -> list[Trade]:
    """Build trades from (price, quantity, side, timestamp) rows."""
    return [Trade(price=D(p), quantity=D(q), side=Side(s), timestamp=ts) for p, q, s, ts in rows]
