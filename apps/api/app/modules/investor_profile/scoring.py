"""Deterministic risk scoring and investor-type classification. No I/O."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from app.modules.investor_profile.catalogue import (
    SingleChoiceQuestion,
    get_question,
    scenario_questions,
    slider_defaults,
)
from app.modules.investor_profile.investor_types import InvestorType, get_investor_type

RISK_SCORE_MIN = 10
RISK_SCORE_MAX = 90
RISK_SCORE_BASE = 50

DIMENSION_MIN = 0
DIMENSION_MAX = 100
DIMENSION_MIDPOINT = 50

# (upper bound exclusive, label, description)
RISK_BANDS: tuple[tuple[int, str, str], ...] = (
    (25, "Conservative", "You prioritize capital preservation with steady, predictable returns."),
    (40, "Moderately Conservative", "You favor stability while accepting modest growth opportunities."),
    (60, "Moderate", "You balance growth potential with risk management."),
    (75, "Moderately Aggressive", "You pursue higher returns and can weather significant volatility."),
)
AGGRESSIVE_BAND = ("Aggressive", "You maximize growth potential with a long-term horizon.")


@dataclass(frozen=True)
class RiskProfile:
    score: int
    label: str
    description: str


@dataclass(frozen=True)
class InvestorDimensions:
    risk: int = DIMENSION_MIDPOINT
    decision: int = DIMENSION_MIDPOINT
    time: int = DIMENSION_MIDPOINT
    focus: int = DIMENSION_MIDPOINT


def round_half_up(value: float) -> int:
    """Round .5 towards +inf, matching the rounding the published numbers were built with."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def as_number(value: Any) -> float | None:
    """Return value as a finite number, or None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


# ── Response normalizer ──────────────────────────────────────────────────────


def normalize_responses(responses: dict[str, Any] | None) -> dict[str, Any]:
    """Return a copy with every slider answered.

    Missing or non-numeric slider values take the slider default; every other
    entry is copied through untouched and unanswered questions stay absent.
    """
    normalized = dict(responses or {})
    for question_id, default in slider_defaults().items():
        number = as_number(normalized.get(question_id))
        normalized[question_id] = default if number is None else number
    return normalized


# ── Risk score ───────────────────────────────────────────────────────────────


def _option_score(responses: dict[str, Any], question_id: str) -> int:
    question = get_question(question_id)
    if not isinstance(question, SingleChoiceQuestion):
        return 0
    answer = responses.get(question_id)
    for option in question.options:
        if option.value == answer:
            return option.score or 0
    return 0


def _timeline_points(years: float | None) -> int:
    if years is None:
        return 0
    if years >= 20:
        return 15
    if years >= 10:
        return 10
    if years >= 5:
        return 0
    if years >= 3:
        return -10
    return -20


def _emergency_points(months: float | None) -> int:
    if months is None:
        return 0
    if months >= 12:
        return 10
    if months >= 6:
        return 5
    if months < 3:
        return -15
    return 0


def compute_risk_score(responses: dict[str, Any]) -> int:
    """Fold the five risk signals onto a base of 50 and clamp to [10, 90]."""
    score: float = RISK_SCORE_BASE
    score += _option_score(responses, "risk-scenario")
    score += _timeline_points(as_number(responses.get("goal-timeline")))
    score += _option_score(responses, "risk-experience")

    tolerance = as_number(responses.get("risk-tolerance"))
    if tolerance:
        score += (tolerance - 20) / 2

    score += _emergency_points(as_number(responses.get("emergency-fund")))

    return int(clamp(round_half_up(score), RISK_SCORE_MIN, RISK_SCORE_MAX))


def _band(score: float) -> tuple[str, str]:
    for upper, label, description in RISK_BANDS:
        if score < upper:
            return label, description
    return AGGRESSIVE_BAND


def risk_label(score: float) -> str:
    return _band(score)[0]


def risk_description(score: float) -> str:
    return _band(score)[1]


def build_risk_profile(score: int) -> RiskProfile:
    label, description = _band(score)
    return RiskProfile(score=score, label=label, description=description)


# ── Investor type ────────────────────────────────────────────────────────────


def compute_dimensions(responses: dict[str, Any]) -> InvestorDimensions:
    """Sum the chosen side's deltas of every answered scenario, then clamp."""
    totals = {"risk": DIMENSION_MIDPOINT, "decision": DIMENSION_MIDPOINT,
              "time": DIMENSION_MIDPOINT, "focus": DIMENSION_MIDPOINT}
    for question in scenario_questions():
        choice = question.choice(responses.get(question.id))
        if choice is None:
            continue
        for dimension, delta in choice.deltas:
            totals[dimension] += delta

    return InvestorDimensions(
        **{k: int(clamp(v, DIMENSION_MIN, DIMENSION_MAX)) for k, v in totals.items()}
    )


def investor_type_code(dimensions: InvestorDimensions) -> str:
    risk = "P" if dimensions.risk >= DIMENSION_MIDPOINT else "G"
    decision = "I" if dimensions.decision >= DIMENSION_MIDPOINT else "A"
    time = "A" if dimensions.time >= DIMENSION_MIDPOINT else "P"
    focus = "C" if dimensions.focus >= DIMENSION_MIDPOINT else "D"
    return f"{risk}{decision}{time}{focus}"


def classify(dimensions: InvestorDimensions) -> tuple[str, InvestorType]:
    """Map dimensions to (code, profile); codes outside the catalogue get The Steward."""
    code = investor_type_code(dimensions)
    return code, get_investor_type(code)
