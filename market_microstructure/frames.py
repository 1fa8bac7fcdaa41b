"""pandas views of trades, books, CVD and volume profiles.

Values stay ``Decimal`` (object dtype); nothing is converted to float.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from market_microstructure.models.book import OrderBook
from market_microstructure.models.profile import VolumeProfile
from market_microstructure.models.tape import CVDPoint, Trade

TRADE_COLUMNS = ["timestamp", "price", "quantity", "side"]
BOOK_COLUMNS = ["side", "level", "price", "quantity"]


def trades_to_frame(trades: Sequence[Trade]) -> pd.DataFrame:
    """One row per trade, input order preserved."""
    rows = [
        {"timestamp": t.timestamp, "price": t.price, "quantity": t.quantity, "side": t.side.value}
        for t in trades
    ]
    return pd.DataFrame(rows, columns=TRADE_COLUMNS)


def book_to_frame(book: OrderBook, levels: int | None = None) -> pd.DataFrame:
    """Asks (farthest first) then bids, ``level`` counting from the touch at 1."""
    rows = []
    asks = list(enumerate(book.asks[:levels], start=1))
    for i, level in reversed(asks):
        rows.append({"side": "ask", "level": i, "price": level.price, "quantity": level.quantity})
    for i, level in enumerate(book.bids[:levels], start=1):
        rows.append({"side": "bid", "level": i, "price": level.price, "quantity": level.quantity})
    return pd.DataFrame(rows, columns=BOOK_COLUMNS)


def cvd_to_series(points: Sequence[CVDPoint]) -> pd.Series:
    """Cumulative delta indexed by trade timestamp."""
    return pd.Series(
        [p.delta for p in points],
        index=pd.Index([p.timestamp for p in points], name="timestamp"),
        name="cvd",
        dtype=object,
    )


def profile_to_frame(profile: VolumeProfile) -> pd.DataFrame:
    """Bucket volumes ascending by price with POC / value-area flags."""
    df = pd.DataFrame(
        {"price": list(profile.levels.keys()), "volume": list(profile.levels.values())},
        columns=["price", "volume"],
    )
    df["is_poc"] = df["price"] == profile.poc
    if profile.val is not None and profile.vah is not None:
        df["in_value_area"] = (df["price"] >= profile.val) & (df["price"] <= profile.vah)
    else:
        df["in_value_area"] = False
    return df
