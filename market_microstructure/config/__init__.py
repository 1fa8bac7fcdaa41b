"""Settings for the analysis service and demo, loaded from YAML."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import yaml
from pydantic import BaseModel, Field


# --- Settings models ---


class OrderBookSettings(BaseModel):
    imbalance_depth: int | None = Field(default=5, ge=0)     # None = every level


class TapeSettings(BaseModel):
    block_threshold: Decimal = Decimal("5.0")
    cluster_time_window: int = 2
    min_cluster_size: int = 3
    aggressive_buy_ratio: Decimal = Decimal("0.6")
    aggressive_sell_ratio: Decimal = Decimal("0.4")


class ProfileSettings(BaseModel):
    tick_size: Decimal = Decimal("1.0")
    value_area_pct: Decimal = Decimal("0.70")


class PatternSettings(BaseModel):
    iceberg_min_fills: int = 3
    iceberg_price_tolerance: Decimal = Decimal("1.0")
    iceberg_size_multiple: Decimal = Decimal("1.5")
    spoofing_threshold: Decimal = Decimal("50.0")
    support_resistance_threshold: Decimal = Decimal("5.0")
    absorption_volume_threshold: Decimal = Decimal("10.0")
    absorption_price_range: Decimal = Decimal("1.0")


class DisplaySettings(BaseModel):
    book_levels: int = 10
    tape_limit: int = 5
    chart_levels: int = 5
    chart_width: int = 20
    top_profile_levels: int = 3


class Settings(BaseModel):
    """Root settings. Every section falls back to its model defaults."""

    orderbook: OrderBookSettings = Field(default_factory=OrderBookSettings)
    tape: TapeSettings = Field(default_factory=TapeSettings)
    profile: ProfileSettings = Field(default_factory=ProfileSettings)
    patterns: PatternSettings = Field(default_factory=PatternSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


# --- Loading ---

_DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"
_USER_CONFIG_PATH = Path.home() / ".market_microstructure" / "config.yaml"

_cached_settings: Settings | None = None


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base. Returns new dict."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(
    user_config_path: Path | None = None,
    _force_reload: bool = False,
) -> Settings:
    """Load defaults.yaml, merge ~/.market_microstructure/config.yaml if present.

    Args:
        user_config_path: Override path for user config file.
        _force_reload: Bypass cache (for testing).

    Returns:
        Merged Settings instance.
    """
    global _cached_settings
    if _cached_settings is not None and not _force_reload:
        return _cached_settings

    # Layer 1: package defaults
    with open(_DEFAULTS_PATH) as f:
        defaults = yaml.safe_load(f) or {}

    # Layer 2: user overrides
    user_path = user_config_path or _USER_CONFIG_PATH
    if user_path.exists():
        with open(user_path) as f:
            user = yaml.safe_load(f) or {}
        merged = _deep_merge(defaults, user)
    else:
        merged = defaults

    _cached_settings = Settings(**merged)
    return _cached_settings


def get_settings() -> Settings:
    """Get cached settings (singleton). Loads on first call."""
    return load_settings()


def reset_settings() -> None:
    """Clear cached settings. Next get_settings() will reload from YAML."""
    global _cached_settings
    _cached_settings = None
