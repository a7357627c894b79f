"""Investor profile service: persist and restore the last report per user."""

from __future__ import annotations

import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums import PlanStatus
from app.models.investment_plan import InvestmentPlan
from app.modules.investor_profile.allocation import (
    DEFAULT_INVESTABLE_AMOUNT,
    DEFAULT_STYLE,
    build_action_plan,
    build_allocation,
    build_key_metrics,
    build_recommendations,
)
from app.modules.investor_profile.engine import DEFAULT_USER_NAME, Report
from app.modules.investor_profile.investor_types import DEFAULT_TYPE_CODE, get_investor_type
from app.modules.investor_profile.narrative import build_narrative, render_plan_markdown
from app.modules.investor_profile.schemas import ReportResponse, SavedReportResponse
from app.modules.investor_profile.scoring import (
    RISK_SCORE_BASE,
    InvestorDimensions,
    build_risk_profile,
    normalize_responses,
)
from app.schemas.auth import CurrentUser

logger = structlog.get_logger()

_PAYLOAD_KEYS = (
    "allocation",
    "recommendations",
    "key_metrics",
    "narrative",
    "action_plan",
    "investment_amount",
)


def report_payload(report: Report) -> dict[str, Any]:
    """JSON-ready report, shaped like ReportResponse."""
    investor_type = asdict(report.investor_type)
    investor_type["code"] = report.investor_type_code
    investor_type["dimensions"] = asdict(report.dimensions)
    return {
        "user_name": report.user_name,
        "risk_profile": asdict(report.risk_profile),
        "investor_type": investor_type,
        "allocation": [asdict(a) for a in report.allocation],
        "allocation_total": report.allocation_total,
        "recommendations": [asdict(r) for r in report.recommendations],
        "key_metrics": asdict(report.key_metrics),
        "narrative": asdict(report.narrative),
        "action_plan": [asdict(s) for s in report.action_plan],
        "investment_amount": report.investment_amount,
    }


def to_report_response(report: Report) -> ReportResponse:
    return ReportResponse.model_validate(report_payload(report))


async def get_latest_plan(db: AsyncSession, user_id: uuid.UUID) -> InvestmentPlan | None:
    result = await db.execute(
        select(InvestmentPlan)
        .where(InvestmentPlan.user_id == user_id)
        .order_by(InvestmentPlan.updated_at.desc())
        .limit(1)
    )
    return result.scalar_one_or_none()


async def save_report(
    db: AsyncSession,
    user: CurrentUser,
    report: Report,
    responses: dict[str, Any],
    generated_at: datetime | None = None,
) -> InvestmentPlan:
    """Store the report as the user's plan, replacing any earlier one."""
    generated_at = generated_at or datetime.now(timezone.utc)
    payload = report_payload(report)
    stored: dict[str, Any] = {key: payload[key] for key in _PAYLOAD_KEYS}
    stored["dimensions"] = payload["investor_type"]["dimensions"]
    stored["answers"] = responses

    plan = await get_latest_plan(db, user.user_id)
    if plan is None:
        plan = InvestmentPlan(user_id=user.user_id)
        db.add(plan)

    plan.name = report.user_name
    plan.responses = stored
    plan.risk_score = report.risk_profile.score
    plan.risk_profile = report.risk_profile.label
    plan.investor_type = report.investor_type_code
    plan.investor_type_name = report.investor_type.name
    plan.plan_content = render_plan_markdown(report, generated_at.date())
    plan.status = PlanStatus.COMPLETE

    await db.flush()
    await db.refresh(plan)

    logger.info(
        "investment_plan_saved",
        user_id=str(user.user_id),
        plan_id=str(plan.id),
        risk_score=plan.risk_score,
        investor_type=plan.investor_type,
    )
    return plan


def restore_report(plan: InvestmentPlan) -> SavedReportResponse:
    """Rebuild a report from a stored plan.

    Pieces missing from older rows are recomputed from the stored risk score
    with the default inputs (no interests, passive style, 50k).
    """
    stored: dict[str, Any] = plan.responses or {}
    answers = normalize_responses(stored.get("answers") or {})
    score = plan.risk_score if plan.risk_score is not None else RISK_SCORE_BASE
    code = plan.investor_type or DEFAULT_TYPE_CODE
    user_name = plan.name or DEFAULT_USER_NAME

    allocation = stored.get("allocation") or [
        asdict(a) for a in build_allocation(score, [], DEFAULT_STYLE, DEFAULT_INVESTABLE_AMOUNT)
    ]
    recommendations = stored.get("recommendations") or [
        asdict(r) for r in build_recommendations(score, [], DEFAULT_STYLE, DEFAULT_INVESTABLE_AMOUNT)
    ]
    key_metrics = stored.get("key_metrics") or asdict(
        build_key_metrics(score, answers.get("goal-timeline"))
    )
    narrative = stored.get("narrative") or asdict(build_narrative(score, answers, user_name))
    action_plan = stored.get("action_plan") or [
        asdict(s) for s in build_action_plan(score, answers)
    ]

    risk_profile = asdict(build_risk_profile(score))
    if plan.risk_profile:
        risk_profile["label"] = plan.risk_profile

    investor_type = asdict(get_investor_type(code))
    investor_type["code"] = code
    investor_type["dimensions"] = stored.get("dimensions") or asdict(InvestorDimensions())

    return SavedReportResponse.model_validate({
        "id": plan.id,
        "generated_at": plan.updated_at or plan.created_at,
        "user_name": user_name,
        "risk_profile": risk_profile,
        "investor_type": investor_type,
        "allocation": allocation,
        "allocation_total": sum(int(a.get("percentage", 0)) for a in allocation),
        "recommendations": recommendations,
        "key_metrics": key_metrics,
        "narrative": narrative,
        "action_plan": action_plan,
        "investment_amount": stored.get("investment_amount") or DEFAULT_INVESTABLE_AMOUNT,
        "responses": stored.get("answers") or {},
        "plan_content": plan.plan_content or "",
    })


async def delete_plan(db: AsyncSession, user_id: uuid.UUID) -> bool:
    plan = await get_latest_plan(db, user_id)
    if plan is None:
        return False
    await db.delete(plan)
    await db.flush()
    logger.info("investment_plan_deleted", user_id=str(user_id), plan_id=str(plan.id))
    return True
