"""Pydantic models for executed trades (time & sales)."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Side(StrEnum):
    """Aggressor side of a trade."""

    BUY = "buy"
    SELL = "sell"


class TradeKind(StrEnum):
    BUY = "buy"
    SELL = "sell"
    BLOCK = "block"


class Trade(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: Decimal
    quantity: Decimal = Field(ge=0)
    side: Side
    timestamp: int


class TradeClass(BaseModel):
    """Classification of a single trade. Blocks keep the aggressor side."""

    model_config = ConfigDict(frozen=True)

    kind: TradeKind
    side: Side


class TradePressure(NamedTuple):
    buy_volume: Decimal
    sell_volume: Decimal
    net_volume: Decimal


class CVDPoint(NamedTuple):
    timestamp: int
    delta: Decimal
