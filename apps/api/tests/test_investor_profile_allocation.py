"""Tests for allocation, recommendations, action plan and key metrics."""

from __future__ import annotations

import json
from dataclasses import asdict

import pytest

from app.modules.investor_profile.allocation import (
    INDIVIDUAL_SECURITY_TYPES,
    AllocationEntry,
    Subcategory,
    allocation_total,
    build_action_plan,
    build_allocation,
    build_key_metrics,
    build_recommendations,
    interest_list,
    investable_amount,
    investment_style,
    require_risk_score,
    to_fixed,
)
from app.modules.investor_profile.schemas import AllocationEntrySchema


def _by_category(entries: list[AllocationEntry]) -> dict[str, int]:
    return {e.category: e.percentage for e in entries}


def _tickers(recommendations) -> list[str]:
    return [r.ticker for r in recommendations]


class TestBuildAllocation:
    def test_reference_case(self):
        entries = _by_category(build_allocation(50, [], "passive", 50_000))
        assert entries["US Equities"] == 33
        assert entries["Fixed Income"] == 30
        assert entries["Cash & Equivalents"] == 6
        assert entries["International Equities"] == 14
        assert entries["Real Estate"] == 8
        assert "Alternatives" not in entries
        assert "Digital Assets" not in entries

    def test_total_is_reported_not_forced(self):
        entries = build_allocation(50, [], "passive", 50_000)
        assert allocation_total(entries) == 91

    def test_none_tag_means_no_specific_interest(self):
        assert build_allocation(50, ["none"]) == build_allocation(50, [])

    def test_specific_interest_drops_unchosen_equities(self):
        entries = _by_category(build_allocation(50, ["bonds"]))
        assert "US Equities" not in entries
        assert "International Equities" not in entries
        assert entries["Fixed Income"] == 30

    def test_us_only_interest(self):
        entries = _by_category(build_allocation(50, ["us-stocks"]))
        assert entries["US Equities"] == 33
        assert "International Equities" not in entries

    def test_no_digital_assets_when_conservative(self):
        entries = _by_category(build_allocation(20, ["crypto"]))
        assert "Digital Assets" not in entries
        assert "Digital Assets" not in _by_category(build_allocation(20, []))

    def test_digital_assets_need_interest_and_score(self):
        assert _by_category(build_allocation(70, ["crypto"]))["Digital Assets"] == 4
        assert "Digital Assets" not in _by_category(build_allocation(70, []))
        assert "Digital Assets" not in _by_category(build_allocation(45, ["crypto"]))

    def test_real_estate_gate(self):
        assert "Real Estate" not in _by_category(build_allocation(40, []))
        assert _by_category(build_allocation(30, ["real-estate"]))["Real Estate"] == 5
        assert _by_category(build_allocation(41, []))["Real Estate"] == 6

    def test_alternatives_gate(self):
        assert "Alternatives" not in _by_category(build_allocation(50, []))
        assert _by_category(build_allocation(51, []))["Alternatives"] == 5
        assert _by_category(build_allocation(30, ["commodities"]))["Alternatives"] == 3

    def test_high_score(self):
        entries = _by_category(build_allocation(90, []))
        assert entries["US Equities"] == 45
        assert entries["International Equities"] == 19
        assert entries["Fixed Income"] == 14
        assert entries["Real Estate"] == 14
        assert entries["Alternatives"] == 9
        assert entries["Cash & Equivalents"] == 3

    def test_fixed_income_and_cash_always_present(self):
        for score in (10, 30, 50, 70, 90):
            categories = _by_category(build_allocation(score, ["crypto"]))
            assert "Fixed Income" in categories
            assert "Cash & Equivalents" in categories

    def test_entries_carry_colors_and_subcategories(self):
        entries = {e.category: e for e in build_allocation(70, ["crypto"])}
        us = entries["US Equities"]
        assert us.color == "#3b82f6"
        assert [(s.name, s.percentage) for s in us.subcategories] == [
            ("Large Cap Growth", 35),
            ("Large Cap Value", 30),
            ("Mid Cap", 20),
            ("Small Cap", 15),
        ]
        for entry in entries.values():
            assert sum(s.percentage for s in entry.subcategories) == 100

    def test_string_interest_is_not_split_into_characters(self):
        assert build_allocation(50, "crypto") == build_allocation(50, [])

    def test_non_finite_score_rejected(self):
        with pytest.raises(ValueError):
            build_allocation(float("nan"), [])
        with pytest.raises(ValueError):
            require_risk_score(float("inf"))

    def test_json_round_trip_preserves_subcategories(self):
        entries = build_allocation(70, ["crypto", "real-estate"])
        payload = json.dumps([asdict(e) for e in entries])
        restored = [
            AllocationEntry(
                category=d["category"],
                percentage=d["percentage"],
                color=d["color"],
                subcategories=tuple(Subcategory(**s) for s in d["subcategories"]),
            )
            for d in json.loads(payload)
        ]
        assert restored == entries

    def test_schema_round_trip(self):
        entry = build_allocation(50, [])[0]
        schema = AllocationEntrySchema.model_validate(asdict(entry))
        again = AllocationEntrySchema.model_validate_json(schema.model_dump_json())
        assert again == schema
        assert [s.name for s in again.subcategories] == [s.name for s in entry.subcategories]


class TestBuildRecommendations:
    def test_core_etfs_always_first(self):
        recs = build_recommendations(10, [], "passive", 10_000)
        assert _tickers(recs)[:3] == ["VTI", "VXUS", "BND"]
        assert [r.allocation for r in recs[:3]] == [25, 15, 20]
        assert recs[0].expense_ratio == "0.03%"

    def test_individual_stocks_for_large_aggressive_portfolio(self):
        recs = build_recommendations(70, [], "growth", 500_000)
        assert any(r.type in INDIVIDUAL_SECURITY_TYPES for r in recs)
        assert {"AAPL", "MSFT", "JNJ", "JPM"} <= set(_tickers(recs))

    def test_no_individual_stocks_below_thresholds(self):
        assert "AAPL" not in _tickers(build_recommendations(40, [], "passive", 1_000_000))
        assert "AAPL" not in _tickers(build_recommendations(70, [], "passive", 99_999))

    def test_reference_case(self):
        recs = build_recommendations(50, [], "passive", 50_000)
        assert _tickers(recs) == ["VTI", "VXUS", "BND", "VNQ", "O"]

    def test_bond_etfs_for_conservative_or_large(self):
        assert "TLT" in _tickers(build_recommendations(30, [], "passive", 10_000))
        assert "TLT" in _tickers(build_recommendations(80, [], "passive", 250_000))
        assert "TLT" not in _tickers(build_recommendations(50, [], "passive", 249_999))

    def test_commodities_follow_interest(self):
        assert "GLD" in _tickers(build_recommendations(30, ["alternatives"]))
        assert "DBC" in _tickers(build_recommendations(30, ["commodities"]))
        assert "GLD" not in _tickers(build_recommendations(90, []))

    def test_crypto_needs_interest_and_score(self):
        assert _tickers(build_recommendations(55, ["crypto"]))[-2:] == ["BTC", "ETH"]
        assert "BTC" not in _tickers(build_recommendations(50, ["crypto"]))
        assert "BTC" not in _tickers(build_recommendations(90, []))

    def test_bad_amount_falls_back_to_default(self):
        assert build_recommendations(70, [], "passive", float("nan")) == build_recommendations(
            70, [], "passive", 50_000
        )
        assert investable_amount(-5) == 50_000
        assert investable_amount(None) == 50_000
        assert investable_amount(250_000) == 250_000


class TestBuildActionPlan:
    def test_short_emergency_fund_leads(self):
        steps = build_action_plan(50, {"emergency-fund": 2, "goal-amount": 50_000})
        assert steps[0].priority == 1
        assert steps[0].title == "Build Emergency Fund First"
        assert steps[1].priority == 2
        assert steps[1].title == "Open Investment Accounts"
        assert [s.priority for s in steps] == [1, 2, 3, 4, 5, 6]

    def test_funded_emergency_skips_step(self):
        steps = build_action_plan(50, {"emergency-fund": 6})
        assert steps[0].title == "Open Investment Accounts"
        assert [s.priority for s in steps] == [1, 2, 3, 4, 5]
        assert steps[-1].title == "Schedule Portfolio Review"

    def test_missing_emergency_fund_counts_as_none(self):
        assert build_action_plan(50, {})[0].title == "Build Emergency Fund First"

    def test_staged_deployment_for_large_amounts(self):
        large = build_action_plan(50, {"emergency-fund": 12, "goal-amount": 250_000})
        small = build_action_plan(50, {"emergency-fund": 12, "goal-amount": 100_000})
        assert "Start with 70% of funds." in large[1].description
        assert "Start with 100% of funds." in small[1].description


class TestBuildKeyMetrics:
    def test_reference_values(self):
        metrics = build_key_metrics(50, 10)
        assert metrics.expected_return == pytest.approx(6.5)
        assert metrics.volatility == pytest.approx(13.0)
        assert metrics.max_drawdown == pytest.approx(-25.5)
        assert metrics.sharpe_ratio == pytest.approx(0.7)
        assert metrics.time_horizon == "10 years"

    def test_display_strings(self):
        metrics = build_key_metrics(50, 10)
        assert metrics.expected_return_display == "6.5%"
        assert metrics.volatility_display == "13.0%"
        assert metrics.max_drawdown_display == "-26%"
        assert metrics.sharpe_ratio_display == "0.70"

    def test_missing_horizon_defaults(self):
        assert build_key_metrics(50, None).time_horizon == "10 years"
        assert build_key_metrics(50, 25).time_horizon == "25 years"

    @pytest.mark.parametrize(
        ("value", "digits", "expected"),
        [(6.5, 1, "6.5"), (13.0, 1, "13.0"), (25.5, 0, "26"), (0.7, 2, "0.70"), (11.0, 0, "11")],
    )
    def test_to_fixed(self, value, digits, expected):
        assert to_fixed(value, digits) == expected


class TestAnswerCoercion:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (["crypto", "bonds"], ["crypto", "bonds"]),
            (("crypto",), ["crypto"]),
            (["crypto", 7, None], ["crypto"]),
            ("crypto", []),
            (5, []),
            (None, []),
            ({"crypto": True}, []),
        ],
    )
    def test_interest_list(self, value, expected):
        assert interest_list(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("growth", "growth"), ("", "passive"), (None, "passive"), (["active"], "passive"), (3, "passive")],
    )
    def test_investment_style(self, value, expected):
        assert investment_style(value) == expected
