"""JSON loaders for OrderBook snapshots and Trade batches.

Files use the models' field names; prices and quantities may be JSON
strings or numbers, strings being preferred since they parse exactly:

    {"bids": [{"price": "50000.00", "quantity": "1.5"}], "asks": [...], "timestamp": 1}
    [{"price": "50000.0", "quantity": "1.0", "side": "buy", "timestamp": 1000}, ...]
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from market_microstructure.data.exceptions import SnapshotLoadError
from market_microstructure.models.book import OrderBook
from market_microstructure.models.tape import Trade

logger = logging.getLogger(__name__)

_TRADES = TypeAdapter(list[Trade])


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotLoadError(path, str(e)) from e


def load_orderbook(path: Path | str) -> OrderBook:
    """Load one order book snapshot. Side ordering is not checked."""
    path = Path(path)
    try:
        book = OrderBook.model_validate_json(_read(path))
    except ValidationError as e:
        raise SnapshotLoadError(path, f"invalid order book ({e.error_count()} errors)") from e
    logger.info("Loaded order book from %s: %d bids, %d asks", path, len(book.bids), len(book.asks))
    return book


def load_trades(path: Path | str) -> list[Trade]:
    """Load a batch of trades in file order."""
    path = Path(path)
    try:
        trades = _TRADES.validate_json(_read(path))
    except ValidationError as e:
        raise SnapshotLoadError(path, f"invalid trades ({e.error_count()} errors)") from e

    if any(b.timestamp < a.timestamp for a, b in zip(trades, trades[1:])):
        logger.warning("Trades in %s are not sorted by timestamp; clusters/CVD assume order", path)
    logger.info("Loaded %d trades from %s", len(trades), path)
    return trades
