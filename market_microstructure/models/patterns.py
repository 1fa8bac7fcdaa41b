"""Pydantic models for detected microstructure patterns."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from market_microstructure.models.book import BookSide


class PatternKind(StrEnum):
    ICEBERG = "iceberg"
    SPOOFING = "spoofing"
    SUPPORT = "support"
    RESISTANCE = "resistance"
    ABSORPTION = "absorption"


class IcebergOrder(BaseModel):
    """Many small, size-consistent fills at one price."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[PatternKind.ICEBERG] = PatternKind.ICEBERG
    price: Decimal
    estimated_size: Decimal


class Spoofing(BaseModel):
    """Oversized resting order away from the best price."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[PatternKind.SPOOFING] = PatternKind.SPOOFING
    price: Decimal
    side: BookSide


class Support(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[PatternKind.SUPPORT] = PatternKind.SUPPORT
    price: Decimal
    strength: Decimal


class Resistance(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal[PatternKind.RESISTANCE] = PatternKind.RESISTANCE
    price: Decimal
    strength: Decimal


class Absorption(BaseModel):
    """Large traded volume inside a narrow price range."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[PatternKind.ABSORPTION] = PatternKind.ABSORPTION
    price: Decimal
    volume: Decimal


Pattern = Annotated[
    Union[IcebergOrder, Spoofing, Support, Resistance, Absorption],
    Field(discriminator="kind"),
]
