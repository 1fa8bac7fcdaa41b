"""Shared test fixtures for market_microstructure tests."""

import pytest

from market_microstructure.config import Settings, reset_settings
from market_microstructure.models.book import OrderBook
from market_microstructure.models.tape import Trade
from market_microstructure.samples import synthetic_trades
from tests.helpers import make_book, make_trades


@pytest.fixture(autouse=True)
def _clean_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of any user config file."""
    return Settings()


@pytest.fixture
def sample_book() -> OrderBook:
    """3x3 book: bids sum 4.6, asks sum 5.5."""
    return make_book(
        bids=[("50000.00", "1.5"), ("49999.50", "2.3"), ("49999.00", "0.8")],
        asks=[("50001.00", "1.2"), ("50001.50", "1.8"), ("50002.00", "2.5")],
        timestamp=1696435200,
    )


@pytest.fixture
def empty_book() -> OrderBook:
    return OrderBook(bids=[], asks=[], timestamp=0)


@pytest.fixture
def tape_trades() -> list[Trade]:
    """Four trades at rising prices: buys 3.0, sells 0.8."""
    return make_trades([
        ("50000.0", "1.0", "buy", 1000),
        ("50001.0", "0.5", "sell", 1001),
        ("50002.0", "2.0", "buy", 1002),
        ("50003.0", "0.3", "sell", 1003),
    ])


@pytest.fixture
def profile_trades() -> list[Trade]:
    """Three fills at 50000 (3.0 total) and one at 50001 (2.0)."""
    return make_trades([
        ("50000.0", "1.0", "buy", 1000),
        ("50000.0", "0.5", "sell", 1001),
        ("50001.0", "2.0", "buy", 1002),
        ("50000.0", "1.5", "buy", 1003),
    ])


@pytest.fixture
def random_trades() -> list[Trade]:
    """500 synthetic trades, sorted by timestamp."""
    return synthetic_trades(500, seed=7)
