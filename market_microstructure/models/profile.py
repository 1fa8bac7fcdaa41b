"""Pydantic model for a volume profile."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator


class VolumeProfile(BaseModel):
    """Traded quantity per price bucket with POC and value area bounds.

    ``levels`` is ordered ascending by bucket price and read-only.
    """

    model_config = ConfigDict(frozen=True)

    levels: Mapping[Decimal, Decimal]
    poc: Decimal | None = None
    vah: Decimal | None = None
    val: Decimal | None = None

    @field_validator("levels", mode="after")
    @classmethod
    def _read_only_levels(cls, levels: Mapping[Decimal, Decimal]) -> Mapping[Decimal, Decimal]:
        return MappingProxyType(dict(levels))

    @field_serializer("levels")
    def _levels_as_dict(self, levels: Mapping[Decimal, Decimal]) -> dict[Decimal, Decimal]:
        return dict(levels)

    @property
    def total_volume(self) -> Decimal:
        return sum(self.levels.values(), Decimal(0))
