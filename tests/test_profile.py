"""Tests for price bucketing, volume profile (POC / value area), delta and CVD."""

from decimal import Decimal

import pytest

from market_microstructure.features.buckets import bucket_trades, round_to_tick
from market_microstructure.features.profile import (
    build_volume_profile,
    calculate_cvd,
    calculate_delta,
)
from market_microstructure.features.tape import calculate_trade_pressure
from market_microstructure.models.tape import Trade
from tests.helpers import D, make_trades


class TestRoundToTick:
    def test_nearest_multiple(self) -> None:
        assert round_to_tick(D("100.26"), D("0.5")) == D("100.5")
        assert round_to_tick(D("100.24"), D("0.5")) == D("100.0")

    def test_halfway_rounds_to_even_multiple(self) -> None:
        assert round_to_tick(D("100.25"), D("0.5")) == D("100.0")
        assert round_to_tick(D("100.75"), D("0.5")) == D("101.0")
        assert round_to_tick(D("50004.5"), D("1.0")) == D("50004")

    def test_exact_multiple_unchanged(self) -> None:
        assert round_to_tick(D("50000.0"), D("1.0")) == D("50000")

    def test_result_keeps_tick_exponent(self) -> None:
        assert str(round_to_tick(D("50000"), D("1.0"))) == "50000.0"
        assert str(round_to_tick(D("100.3"), D("0.25"))) == "100.25"

    @pytest.mark.parametrize("tick", ["0", "-1"])
    def test_non_positive_tick(self, tick: str) -> None:
        with pytest.raises(ValueError, match="tick must be positive"):
            round_to_tick(D("100"), D(tick))

    def test_bucket_keys_ascending(self) -> None:
        trades = make_trades([("103", "1", "buy", 1), ("101", "1", "buy", 2), ("102", "1", "buy", 3)])
        assert list(bucket_trades(trades, D("1"))) == [D("101"), D("102"), D("103")]


class TestVolumeProfile:
    def test_poc_and_levels(self, profile_trades: list[Trade]) -> None:
        profile = build_volume_profile(profile_trades, D("1.0"))
        assert profile.levels == {D("50000"): D("3.0"), D("50001"): D("2.0")}
        assert profile.poc == D("50000.0")

    def test_value_area(self, profile_trades: list[Trade]) -> None:
        profile = build_volume_profile(profile_trades, D("1.0"))
        # Target 3.5: the 3.0 bucket alone falls short, so 50001 is added.
        assert profile.val == D("50000")
        assert profile.vah == D("50001")

    def test_levels_ordered_by_price(self) -> None:
        trades = make_trades([("105", "1", "buy", 1), ("100", "2", "buy", 2), ("103", "3", "sell", 3)])
        profile = build_volume_profile(trades, D("1"))
        assert list(profile.levels) == [D("100"), D("103"), D("105")]

    def test_poc_tie_lowest_price_wins(self) -> None:
        trades = make_trades([("101", "2", "buy", 1), ("100", "2", "sell", 2)])
        assert build_volume_profile(trades, D("1")).poc == D("100")

    def test_value_area_ranked_by_volume_not_contiguity(self) -> None:
        trades = make_trades([
            ("100", "5", "buy", 1),
            ("101", "1", "buy", 2),
            ("102", "4", "buy", 3),
        ])
        profile = build_volume_profile(trades, D("1"))
        # Target 7: 100 (5) then 102 (4) reach it; 101 is never taken.
        assert profile.poc == D("100")
        assert profile.val == D("100")
        assert profile.vah == D("102")

    def test_value_area_tie_takes_lower_price(self) -> None:
        trades = make_trades([
            ("100", "2", "buy", 1),
            ("101", "4", "buy", 2),
            ("102", "2", "buy", 3),
        ])
        profile = build_volume_profile(trades, D("1"))
        # Target 5.6: 101 (4), then 100 wins the tie with 102 and reaches 6.
        assert profile.poc == D("101")
        assert profile.val == D("100")
        assert profile.vah == D("101")

    def test_value_area_stops_once_target_reached(self) -> None:
        trades = make_trades([("100", "7", "buy", 1), ("101", "3", "buy", 2)])
        profile = build_volume_profile(trades, D("1"))
        assert profile.val == profile.vah == D("100")

    def test_value_area_pct_override(self) -> None:
        trades = make_trades([("100", "7", "buy", 1), ("101", "3", "buy", 2), ("99", "1", "sell", 3)])
        profile = build_volume_profile(trades, D("1"), value_area_pct=D("1"))
        assert profile.val == D("99")
        assert profile.vah == D("101")

    def test_bucketing_accumulates_nearby_prices(self) -> None:
        trades = make_trades([("100.2", "1", "buy", 1), ("99.9", "2", "sell", 2), ("100.6", "4", "buy", 3)])
        profile = build_volume_profile(trades, D("1"))
        assert profile.levels == {D("100"): D("3"), D("101"): D("4")}
        assert profile.poc == D("101")

    def test_deterministic(self, random_trades: list[Trade]) -> None:
        first = build_volume_profile(random_trades, D("1.0"))
        second = build_volume_profile(list(reversed(random_trades)), D("1.0"))
        assert first == second
        assert first.val <= first.poc <= first.vah
        assert first.total_volume == sum((t.quantity for t in random_trades), Decimal(0))

    def test_empty(self) -> None:
        profile = build_volume_profile([], D("1.0"))
        assert profile.levels == {}
        assert profile.poc is None
        assert profile.vah is None
        assert profile.val is None


class TestDelta:
    def test_delta(self, profile_trades: list[Trade]) -> None:
        # buys 1.0 + 2.0 + 1.5, sells 0.5
        assert calculate_delta(profile_trades) == D("4.0")

    def test_matches_trade_pressure(self, random_trades: list[Trade]) -> None:
        assert calculate_delta(random_trades) == calculate_trade_pressure(random_trades).net_volume

    def test_empty(self) -> None:
        assert calculate_delta([]) == Decimal(0)


class TestCVD:
    def test_running_sum(self, profile_trades: list[Trade]) -> None:
        cvd = calculate_cvd(profile_trades)
        assert cvd == [
            (1000, D("1.0")),
            (1001, D("0.5")),
            (1002, D("2.5")),
            (1003, D("4.0")),
        ]

    def test_point_fields(self, profile_trades: list[Trade]) -> None:
        last = calculate_cvd(profile_trades)[-1]
        assert last.timestamp == 1003
        assert last.delta == D("4.0")

    def test_final_value_equals_delta(self, random_trades: list[Trade]) -> None:
        cvd = calculate_cvd(random_trades)
        assert len(cvd) == len(random_trades)
        assert cvd[-1].delta == calculate_delta(random_trades)

    def test_empty(self) -> None:
        assert calculate_cvd([]) == []
