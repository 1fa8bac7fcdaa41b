"""Pydantic models for order books, trades, profiles and patterns."""

from market_microstructure.models.book import BookSide, Level, OrderBook
from market_microstructure.models.tape import (
    CVDPoint,
    Side,
    Trade,
    TradeClass,
    TradeKind,
    TradePressure,
)
from market_microstructure.models.profile import VolumeProfile
from market_microstructure.models.patterns import (
    Absorption,
    IcebergOrder,
    Pattern,
    PatternKind,
    Resistance,
    Spoofing,
    Support,
)

__all__ = [
    "Absorption",
    "BookSide",
    "CVDPoint",
    "IcebergOrder",
    "Level",
    "OrderBook",
    "Pattern",
    "PatternKind",
    "Resistance",
    "Side",
    "Spoofing",
    "Support",
    "Trade",
    "TradeClass",
    "TradeKind",
    "TradePressure",
    "VolumeProfile",
]
