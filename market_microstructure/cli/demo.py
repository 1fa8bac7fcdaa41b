"""Demo driver: runs sample (or loaded) data through the analysis engine.

Usage (after pip install):
    microstructure-demo orderbook
    microstructure-demo tape --synthetic 200
    microstructure-demo patterns --book book.json --trades trades.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal

from tabulate import tabulate

from market_microstructure.config import Settings, get_settings
from market_microstructure.data import SnapshotLoadError, load_orderbook, load_trades
from market_microstructure.display import (
    ascii_depth_chart,
    format_orderbook,
    format_patterns,
    format_trades,
    format_volume_profile,
)
from market_microstructure.frames import cvd_to_series
from market_microstructure.features.profile import calculate_cvd
from market_microstructure.models.analysis import AggressionBias
from market_microstructure.models.book import OrderBook
from market_microstructure.models.tape import Trade
from market_microstructure.samples import (
    absorption_tape,
    iceberg_tape,
    sample_orderbook,
    sample_tape,
    spoofed_orderbook,
    synthetic_trades,
)
from market_microstructure.service.analysis import analyze_orderbook, analyze_tape, scan_patterns


def print_section(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


def kvtable(pairs: list[tuple[str, object]]) -> None:
    """Print key-value pairs as a clean 2-column table."""
    rows = [[k, "n/a" if v is None else v] for k, v in pairs]
    print(tabulate(rows, tablefmt="plain", stralign="left", disable_numparse=True))


def _fmt(value: Decimal | None, places: int = 2) -> str | None:
    return None if value is None else f"{value:.{places}f}"


def run_orderbook(book: OrderBook, settings: Settings) -> None:
    print_section("Order Book Analysis")
    print(format_orderbook(book, settings.display.book_levels, settings.display.chart_width))

    a = analyze_orderbook(book, settings)
    print("\n--- Metrics ---")
    kvtable([
        ("Best Bid", a.best_bid),
        ("Best Ask", a.best_ask),
        ("Spread", a.spread),
        ("Spread %", _fmt(a.spread_pct, 4)),
        ("Mid Price", a.mid_price),
        ("Weighted Mid", _fmt(a.weighted_mid_price, 4)),
        (f"Imbalance (depth {a.imbalance_depth or 'all'})", _fmt(a.imbalance, 4)),
        ("Bid Depth", a.bid_depth),
        ("Ask Depth", a.ask_depth),
    ])

    print()
    print(ascii_depth_chart(book, settings.display.chart_levels, settings.display.chart_width))


def run_tape(trades: list[Trade], settings: Settings) -> None:
    print_section("Tape Reading & Metrics")
    print(format_trades(trades, settings.display.tape_limit))

    a = analyze_tape(trades, settings)
    print("\n--- Trade Pressure ---")
    kvtable([
        ("Buy Volume", _fmt(a.buy_volume)),
        ("Sell Volume", _fmt(a.sell_volume)),
        ("Net Volume", _fmt(a.net_volume)),
        ("Sentiment", "BULLISH" if a.net_volume > 0 else "BEARISH"),
    ])

    print("\n--- Aggression ---")
    bias_text = {
        AggressionBias.BUYERS: "High buying aggression - buyers in control",
        AggressionBias.SELLERS: "High selling aggression - sellers in control",
        AggressionBias.BALANCED: "Balanced aggression",
    }
    kvtable([("Aggression Ratio", _fmt(a.aggression_ratio)), ("Reading", bias_text[a.aggression_bias])])

    print(f"\n--- Block Trades (>= {settings.tape.block_threshold}) ---")
    if a.block_trades:
        print(format_trades(a.block_trades, len(a.block_trades)))
    else:
        print("  No block trades detected")

    print("\n--- VWAP ---")
    kvtable([
        ("VWAP", _fmt(a.vwap)),
        ("Last Price", _fmt(a.last_price)),
        ("Distance from VWAP %", _fmt(a.vwap_distance_pct, 3)),
    ])

    print("\n--- Delta & CVD ---")
    kvtable([("Delta", _fmt(a.delta)), ("Final CVD", _fmt(a.final_cvd))])
    cvd = cvd_to_series(calculate_cvd(trades))
    if not cvd.empty:
        print(tabulate(
            [[ts, f"{v:.2f}"] for ts, v in cvd.tail(5).items()],
            headers=["Timestamp", "CVD"],
            tablefmt="simple",
            disable_numparse=True,
        ))

    print("\n--- Volume Profile ---")
    print(format_volume_profile(a.volume_profile, settings.display.top_profile_levels))

    print("\n--- Trade Clusters ---")
    if a.cluster_starts:
        for start in a.cluster_starts:
            print(f"  Cluster starting at trade #{start + 1}")
    else:
        print("  No significant clusters detected")


def run_patterns(
    book: OrderBook | None,
    trades: list[Trade] | None,
    settings: Settings,
) -> None:
    print_section("Pattern Detection")
    print(format_patterns(scan_patterns(book=book, trades=trades, settings=settings)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Market microstructure analysis demo")
    parser.add_argument("command", choices=["orderbook", "tape", "patterns"])
    parser.add_argument("--book", help="Order book snapshot JSON file")
    parser.add_argument("--trades", help="Trade batch JSON file")
    parser.add_argument("--synthetic", type=int, metavar="N", help="Use N synthetic trades")
    parser.add_argument("--seed", type=int, default=42, help="Seed for --synthetic")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = get_settings()

    try:
        book = load_orderbook(args.book) if args.book else None
        trades = load_trades(args.trades) if args.trades else None
    except SnapshotLoadError as e:
        print(f"\n  ERROR: {e}", file=sys.stderr)
        return 1
    if trades is None and args.synthetic:
        trades = synthetic_trades(args.synthetic, seed=args.seed)

    if args.command == "orderbook":
        run_orderbook(book or sample_orderbook(), settings)
    elif args.command == "tape":
        run_tape(trades if trades is not None else sample_tape(), settings)
    else:
        if book is None and trades is None:
            # Each sample batch shows one pattern family.
            run_patterns(spoofed_orderbook(), iceberg_tape(), settings)
            run_patterns(None, absorption_tape(), settings)
        else:
            run_patterns(book, trades, settings)

    print_section("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
