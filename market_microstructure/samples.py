"""Sample snapshots and trade batches for demos, plus a synthetic tape generator."""

from __future__ import annotations

from decimal import Decimal

import numpy as np

from market_microstructure.models.book import Level, OrderBook
from market_microstructure.models.tape import Side, Trade


def _level(price: str, quantity: str) -> Level:
    return Level(price=Decimal(price), quantity=Decimal(quantity))


def _trade(price: str, quantity: str, side: Side, timestamp: int) -> Trade:
    return Trade(price=Decimal(price), quantity=Decimal(quantity), side=side, timestamp=timestamp)


def sample_orderbook() -> OrderBook:
    """Three-level BTC-style book with more resting size on the ask side."""
    return OrderBook(
        bids=[_level("50000.00", "1.5"), _level("49999.50", "2.3"), _level("49999.00", "0.8")],
        asks=[_level("50001.00", "1.2"), _level("50001.50", "1.8"), _level("50002.00", "2.5")],
        timestamp=1696435200,
    )


def spoofed_orderbook() -> OrderBook:
    """Book with an oversized bid one level behind the touch."""
    return OrderBook(
        bids=[_level("50000.0", "1.0"), _level("49999.0", "100.0"), _level("49998.0", "0.5")],
        asks=[_level("50001.0", "1.0"), _level("50002.0", "0.8")],
        timestamp=1000,
    )


def sample_tape() -> list[Trade]:
    """Eight trades drifting up, ending in a 10-lot block buy."""
    start = 1696435200
    rows = [
        ("50000.0", "1.0", Side.BUY),
        ("50001.0", "0.5", Side.SELL),
        ("50002.0", "2.0", Side.BUY),
        ("50003.0", "0.3", Side.SELL),
        ("50004.0", "1.5", Side.BUY),
        ("50005.0", "0.8", Side.BUY),
        ("50004.5", "0.4", Side.SELL),
        ("50006.0", "10.0", Side.BUY),
    ]
    return [_trade(p, q, s, start + i) for i, (p, q, s) in enumerate(rows)]


def iceberg_tape() -> list[Trade]:
    """Five small, similar buys at one price."""
    sizes = ["0.1", "0.12", "0.11", "0.1", "0.13"]
    return [_trade("50000.0", q, Side.BUY, 1000 + i) for i, q in enumerate(sizes)]


def absorption_tape() -> list[Trade]:
    """15.5 traded inside a 0.2 range."""
    return [
        _trade("50000.0", "5.0", Side.BUY, 1000),
        _trade("50000.2", "4.5", Side.SELL, 1001),
        _trade("50000.1", "6.0", Side.BUY, 1002),
    ]


def synthetic_trades(
    n: int,
    base_price: float = 50000.0,
    tick: str = "0.5",
    volatility: float = 2.0,
    mean_size: float = 0.5,
    buy_probability: float = 0.5,
    start: int = 1696435200,
    seed: int = 42,
) -> list[Trade]:
    """Generate a random-walk tape.

    Prices move in whole ticks, sizes are exponential (rounded to 3 dp,
    floored at 0.001), timestamps advance 0-3 units per trade so the tape
    contains both bursts and gaps.

    Args:
        n: Number of trades.
        base_price: Starting price.
        tick: Price increment, as a decimal string.
        volatility: Std of the per-trade move, in ticks.
        mean_size: Mean trade size.
        buy_probability: Chance each trade is a buy.
        start: First timestamp.
        seed: Random seed.
    """
    rng = np.random.default_rng(seed)
    tick_dec = Decimal(tick)

    moves = np.rint(rng.normal(0.0, volatility, n)).astype(int)
    ticks_from_base = np.cumsum(moves)
    sizes = np.maximum(np.round(rng.exponential(mean_size, n), 3), 0.001)
    buys = rng.random(n) < buy_probability
    gaps = rng.integers(0, 4, n)
    timestamps = start + np.cumsum(gaps)

    base = Decimal(str(base_price))
    return [
        Trade(
            price=base + tick_dec * int(ticks_from_base[i]),
            quantity=Decimal(f"{sizes[i]:.3f}"),
            side=Side.BUY if buys[i] else Side.SELL,
            timestamp=int(timestamps[i]),
        )
        for i in range(n)
    ]
