"""Prose for the report: narrative paragraphs and the markdown plan document."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any

from app.modules.investor_profile.allocation import (
    DEFAULT_HORIZON_YEARS,
    DEFAULT_INVESTABLE_AMOUNT,
    build_allocation,
    interest_list,
    investable_amount,
    investment_style,
)
from app.modules.investor_profile.scoring import as_number, risk_label, round_half_up

if TYPE_CHECKING:
    from app.modules.investor_profile.engine import Report

DEFAULT_GOAL = "wealth-growth"

DISCLAIMER = (
    "This is educational guidance, not financial advice. Consider consulting a licensed "
    "advisor for personalized recommendations."
)

_IMPLEMENTATION_APPROACH: dict[str, str] = {
    "passive": "a systematic, buy-and-hold approach using low-cost index funds",
    "active": "selective positions in individual securities alongside core index holdings",
}
_DEFAULT_APPROACH = "a value-oriented selection methodology focused on quality at reasonable prices"


@dataclass(frozen=True)
class Narrative:
    executive: str
    risk_analysis: str
    allocation_rationale: str
    implementation_guide: str
    rebalancing: str


def format_amount(amount: float) -> str:
    """Thousands-separated dollars, no decimals for whole amounts."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.2f}"


def _number(value: Any, default: float) -> float:
    number = as_number(value)
    return default if not number else number


def _horizon_word(years: float) -> str:
    if years > 10:
        return "long"
    if years > 5:
        return "medium"
    return "shorter"


def build_narrative(risk_score: int, responses: dict[str, Any], user_name: str | None) -> Narrative:
    """Fill the report paragraphs from the computed values.

    The executive summary counts the asset classes of the user's own
    allocation (their interests applied), not of the interest-free default.
    """
    timeline = _number(responses.get("goal-timeline"), DEFAULT_HORIZON_YEARS)
    goal = responses.get("goal-primary") or DEFAULT_GOAL
    style = investment_style(responses.get("pref-style"))
    amount = investable_amount(responses.get("goal-amount") or DEFAULT_INVESTABLE_AMOUNT)
    interests = interest_list(responses.get("pref-assets"))
    label = risk_label(risk_score)
    years = int(timeline) if float(timeline).is_integer() else timeline
    asset_classes = len(build_allocation(risk_score, interests, style, amount))

    executive = (
        f"{user_name or 'Investor'}, based on your {label.lower()} risk profile and "
        f"{years}-year horizon, we've designed a diversified portfolio strategy targeting "
        f"{'income generation' if goal == 'income' else 'long-term wealth accumulation'}. "
        f"Your ${format_amount(amount)} portfolio is allocated across {asset_classes} asset "
        "classes to optimize risk-adjusted returns."
    )

    tolerance = (
        "can tolerate higher volatility in pursuit of greater returns"
        if risk_score > 50
        else "prefer stability and capital preservation over aggressive growth"
    )
    risk_analysis = (
        f"Your risk score of {risk_score}/100 places you in the {label} category. "
        f"This means you {tolerance}. We've calibrated your equity exposure to "
        f"{30 + round_half_up(risk_score * 0.5)}% to align with this profile."
    )

    if timeline > 10:
        horizon_note = (
            "With time on your side, we can afford to weather market volatility for "
            "potentially higher returns."
        )
    else:
        horizon_note = "We've emphasized stability to protect against near-term fluctuations."
    allocation_rationale = (
        f"The portfolio's {'growth-oriented' if risk_score > 50 else 'balanced'} structure "
        f"reflects your {_horizon_word(timeline)}-term horizon. {horizon_note}"
    )

    implementation_guide = (
        f"We recommend {_IMPLEMENTATION_APPROACH.get(style, _DEFAULT_APPROACH)}. Start by "
        "establishing core positions, then systematically add to them through "
        "dollar-cost averaging."
    )

    rebalancing = (
        f"Review your portfolio {'monthly' if timeline < 5 else 'quarterly'} and rebalance "
        "when any allocation drifts more than 5% from target. This disciplined approach "
        "captures value from market movements while maintaining your risk profile."
    )

    return Narrative(
        executive=executive,
        risk_analysis=risk_analysis,
        allocation_rationale=allocation_rationale,
        implementation_guide=implementation_guide,
        rebalancing=rebalancing,
    )


def render_plan_markdown(report: Report, generated_on: date) -> str:
    """Render the full plan as a markdown document."""
    profile = report.risk_profile
    investor = report.investor_type
    metrics = report.key_metrics
    owner = f"{report.user_name}'s" if report.user_name else "Your"

    lines = [
        f"# {owner} Personalized Investment Plan",
        f"*Generated on {generated_on.isoformat()}*",
        "",
        "## Executive Summary",
        f"Based on your responses, you have a **{profile.label}** risk profile with a score "
        f"of {profile.score}/100. {profile.description}",
        "",
        f"## Your Investor Type: {investor.name} ({report.investor_type_code})",
        f"*{investor.tagline}*",
        "",
        investor.description,
        "",
        "### Strengths",
        *(f"- {s}" for s in investor.strengths),
        "",
        "### Challenges to Watch",
        *(f"- {c}" for c in investor.challenges),
        "",
        "## Recommended Asset Allocation",
        "",
        "| Asset Class | Allocation |",
        "|-------------|------------|",
        *(f"| {a.category} | {a.percentage}% |" for a in report.allocation),
        "",
        "## Key Metrics",
        f"- **Expected Annual Return:** {metrics.expected_return_display}",
        f"- **Expected Volatility:** {metrics.volatility_display}",
        f"- **Maximum Drawdown:** {metrics.max_drawdown_display}",
        f"- **Sharpe Ratio:** {metrics.sharpe_ratio_display}",
        f"- **Investment Horizon:** {metrics.time_horizon}",
        "",
        "## Investment Philosophy",
        report.narrative.executive,
        "",
        "## Implementation Guide",
        report.narrative.implementation_guide,
        "",
        "## Rebalancing Strategy",
        report.narrative.rebalancing,
        "",
        "## Action Plan",
        "",
    ]
    for step in report.action_plan:
        lines.extend([f"### {step.priority}. {step.title} ({step.timeframe})", step.description, ""])
    lines.extend(["---", f"*{DISCLAIMER}*", ""])
    return "\n".join(lines)
