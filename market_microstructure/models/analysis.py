"""Pydantic models for per-snapshot and per-batch analysis reports."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel

from market_microstructure.models.profile import VolumeProfile
from market_microstructure.models.tape import Trade


class AggressionBias(StrEnum):
    BUYERS = "buyers"
    SELLERS = "sellers"
    BALANCED = "balanced"


class OrderBookAnalysis(BaseModel):
    timestamp: int
    best_bid: Decimal | None
    best_ask: Decimal | None
    spread: Decimal | None
    spread_pct: Decimal | None
    mid_price: Decimal | None
    weighted_mid_price: Decimal | None
    imbalance: Decimal
    imbalance_depth: int | None
    bid_depth: Decimal
    ask_depth: Decimal


class TapeAnalysis(BaseModel):
    trade_count: int
    buy_volume: Decimal
    sell_volume: Decimal
    net_volume: Decimal
    aggression_ratio: Decimal
    aggression_bias: AggressionBias
    vwap: Decimal | None
    last_price: Decimal | None
    vwap_distance_pct: Decimal | None
    delta: Decimal
    final_cvd: Decimal | None
    block_trades: list[Trade]
    cluster_starts: list[int]
    volume_profile: VolumeProfile
