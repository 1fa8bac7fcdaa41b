"""Plain-text rendering. Every function returns a string; callers print it."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from tabulate import tabulate

from market_microstructure.frames import book_to_frame, profile_to_frame, trades_to_frame
from market_microstructure.models.book import Level, OrderBook
from market_microstructure.models.patterns import (
    Absorption,
    IcebergOrder,
    Pattern,
    Resistance,
    Spoofing,
    Support,
)
from market_microstructure.models.profile import VolumeProfile
from market_microstructure.models.tape import Side, Trade

_RULE = "─" * 50


def _bar(quantity: Decimal, max_qty: Decimal, width: int) -> str:
    if max_qty <= 0:
        return "▓"
    return "▓" * max(int(quantity / max_qty * width), 1)


def format_orderbook(book: OrderBook, levels: int = 10, width: int = 20) -> str:
    """Asks above the rule (farthest first), bids below, with size bars."""
    df = book_to_frame(book, levels)
    if df.empty:
        return f"=== Order Book ===\nTimestamp: {book.timestamp}\nNo data"

    max_qty = max(df["quantity"])
    df["bar"] = [_bar(q, max_qty, width) for q in df["quantity"]]
    asks = df[df["side"] == "ask"]
    bids = df[df["side"] == "bid"]

    lines = ["=== Order Book ===", f"Timestamp: {book.timestamp}", "", "Asks (Sell Orders):"]
    for row in asks.itertuples():
        lines.append(f"  ${str(row.price):<12} | {row.bar} {row.quantity}")
    lines.append(_RULE)
    for row in bids.itertuples():
        lines.append(f"  ${str(row.price):<12} | {row.bar} {row.quantity}")
    lines.append("Bids (Buy Orders)")
    return "\n".join(lines)


def format_trades(trades: Sequence[Trade], limit: int = 5) -> str:
    """Time & sales table of the first ``limit`` trades."""
    df = trades_to_frame(trades[:limit])
    df["side"] = ["BUY" if s == Side.BUY else "SELL" for s in df["side"]]
    df["price"] = [f"${p}" for p in df["price"]]
    df = df.rename(columns={"timestamp": "Time", "price": "Price", "quantity": "Quantity", "side": "Side"})
    table = tabulate(df, headers="keys", tablefmt="simple", stralign="right", showindex=False, disable_numparse=True)
    return f"=== Trade Tape ===\n{table}"


def _chart_rows(levels: Sequence[Level], label: str, max_qty: Decimal, width: int) -> list[str]:
    return [f"${str(level.price):<10} {label} │{_bar(level.quantity, max_qty, width)}" for level in levels]


def ascii_depth_chart(book: OrderBook, height: int = 5, width: int = 20) -> str:
    """Horizontal depth bars, ``height`` levels per side, scaled to the largest size."""
    if not book.bids and not book.asks:
        return "No data"

    max_qty = max(level.quantity for level in (*book.bids, *book.asks))
    lines = ["Order Book Depth:", f"Max Volume: {max_qty}", ""]
    lines.extend(_chart_rows(book.asks[:height][::-1], "ASK", max_qty, width))
    lines.append("─" * 40)
    lines.extend(_chart_rows(book.bids[:height], "BID", max_qty, width))
    return "\n".join(lines)


def _describe(pattern: Pattern) -> tuple[str, Decimal, str]:
    if isinstance(pattern, IcebergOrder):
        return "Iceberg", pattern.price, f"estimated size {pattern.estimated_size}"
    if isinstance(pattern, Spoofing):
        return "Spoofing", pattern.price, f"{pattern.side} side, large order away from touch"
    if isinstance(pattern, Support):
        return "Support", pattern.price, f"volume {pattern.strength}"
    if isinstance(pattern, Resistance):
        return "Resistance", pattern.price, f"volume {pattern.strength}"
    if isinstance(pattern, Absorption):
        return "Absorption", pattern.price, f"volume {pattern.volume} absorbed"
    raise TypeError(f"Unknown pattern type: {type(pattern).__name__}")


def format_patterns(patterns: Sequence[Pattern]) -> str:
    if not patterns:
        return "No patterns detected"
    rows = []
    for p in patterns:
        name, price, detail = _describe(p)
        rows.append({"Pattern": name, "Price": f"${price}", "Detail": detail})
    return tabulate(rows, headers="keys", tablefmt="simple", stralign="left", disable_numparse=True)


def format_volume_profile(profile: VolumeProfile, top: int | None = None) -> str:
    """POC / VAH / VAL summary and the bucket table (``top`` highest-volume rows if set)."""
    if profile.poc is None:
        return "Empty volume profile"

    lines = [
        f"Point of Control (POC): ${profile.poc}",
        f"Value Area High (VAH):  ${profile.vah}",
        f"Value Area Low (VAL):   ${profile.val}",
        "",
    ]
    df = profile_to_frame(profile)
    if top is not None:
        order = sorted(range(len(df)), key=lambda i: (-df["volume"][i], df["price"][i]))
        df = df.iloc[order[:top]]
    rows = [
        {
            "Price": f"${row.price}",
            "Volume": str(row.volume),
            "": "POC" if row.is_poc else ("VA" if row.in_value_area else ""),
        }
        for row in df.itertuples()
    ]
    lines.append(tabulate(rows, headers="keys", tablefmt="simple", stralign="right", disable_numparse=True))
    return "\n".join(lines)
