"""Pydantic models for order book snapshots."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class BookSide(StrEnum):
    BID = "bid"
    ASK = "ask"


class Level(BaseModel):
    """One price/quantity pair on one side of the book."""

    model_config = ConfigDict(frozen=True)

    price: Decimal
    quantity: Decimal = Field(ge=0)


class OrderBook(BaseModel):
    """Order book snapshot.

    Bids must be sorted by price descending and asks ascending, so index 0
    of each side is the best price. The ordering is not checked here.
    """

    model_config = ConfigDict(frozen=True)

    bids: tuple[Level, ...] = ()
    asks: tuple[Level, ...] = ()
    timestamp: int = 0
