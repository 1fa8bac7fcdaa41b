"""Tests for YAML settings loading and caching."""

from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from market_microstructure.config import (
    Settings,
    _deep_merge,
    get_settings,
    load_settings,
    reset_settings,
)



class TestDefaults:
    def test_yaml_defaults_match_model_defaults(self, tmp_path: Path) -> None:
        loaded = load_settings(user_config_path=tmp_path / "missing.yaml", _force_reload=True)
        assert loaded == Settings()

    def test_decimal_fields_are_exact(self, tmp_path: Path) -> None:
        loaded = load_settings(user_config_path=tmp_path / "missing.yaml", _force_reload=True)
        assert loaded.profile.value_area_pct == Decimal("0.70")
        assert loaded.tape.block_threshold == Decimal("5.0")
        assert loaded.patterns.iceberg_size_multiple == Decimal("1.5")
        assert loaded.orderbook.imbalance_depth == 5


class TestUserOverrides:
    def test_partial_override_merges(self, tmp_path: Path) -> None:
        user = tmp_path / "config.yaml"
        user.write_text(
            "tape:\n  block_threshold: '2.5'\n"
            "orderbook:\n  imbalance_depth: null\n"
        )
        loaded = load_settings(user_config_path=user, _force_reload=True)
        assert loaded.tape.block_threshold == Decimal("2.5")
        assert loaded.tape.min_cluster_size == 3
        assert loaded.orderbook.imbalance_depth is None
        assert loaded.patterns.spoofing_threshold == Decimal("50.0")

    def test_empty_user_file(self, tmp_path: Path) -> None:
        user = tmp_path / "config.yaml"
        user.write_text("")
        assert load_settings(user_config_path=user, _force_reload=True) == Settings()

    def test_invalid_value_rejected(self, tmp_path: Path) -> None:
        user = tmp_path / "config.yaml"
        user.write_text("tape:\n  min_cluster_size: lots\n")
        with pytest.raises(ValidationError):
            load_settings(user_config_path=user, _force_reload=True)

    def test_negative_imbalance_depth_rejected(self, tmp_path: Path) -> None:
        user = tmp_path / "config.yaml"
        user.write_text("orderbook:\n  imbalance_depth: -1\n")
        with pytest.raises(ValidationError):
            load_settings(user_config_path=user, _force_reload=True)


class TestCaching:
    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_reset_reloads(self) -> None:
        first = get_settings()
        reset_settings()
        assert get_settings() is not first

    def test_force_reload(self, tmp_path: Path) -> None:
        first = get_settings()
        second = load_settings(user_config_path=tmp_path / "none.yaml", _force_reload=True)
        assert second is not first
        assert get_settings() is second


def test_deep_merge_does_not_mutate() -> None:
    base = {"a": {"x": 1, "y": 2}, "b": 3}
    merged = _deep_merge(base, {"a": {"y": 5}})
    assert merged == {"a": {"x": 1, "y": 5}, "b": 3}
    assert base == {"a": {"x": 1, "y": 2}, "b": 3}
