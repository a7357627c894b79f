"""Investor profile API router: questionnaire, preview and saved reports."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import get_current_user
from app.core.database import get_db
from app.modules.investor_profile import service
from app.modules.investor_profile.allocation import (
    allocation_total,
    build_allocation,
    build_recommendations,
)
from app.modules.investor_profile.catalogue import (
    SECTIONS,
    get_question,
    pages,
    slider_defaults,
)
from app.modules.investor_profile.engine import generate_report
from app.modules.investor_profile.investor_types import GLOSSARY, INVESTOR_TYPES
from app.modules.investor_profile.schemas import (
    AllocationEntrySchema,
    AllocationRequest,
    AllocationResponse,
    GlossaryTermSchema,
    InvestorTypeSchema,
    PageSchema,
    QuestionnaireResponse,
    RecommendationSchema,
    ReportRequest,
    ReportResponse,
    SavedReportResponse,
    SectionSchema,
)
from app.schemas.auth import CurrentUser

router = APIRouter(prefix="/investor-profile", tags=["investor-profile"])


@router.get("/questions", response_model=QuestionnaireResponse)
async def get_questionnaire():
    page_list = [
        PageSchema(
            index=p.index,
            section=p.section,
            title=p.title,
            questions=[asdict(get_question(qid)) for qid in p.question_ids],
        )
        for p in pages()
    ]
    return QuestionnaireResponse(
        sections=[SectionSchema.model_validate(s) for s in SECTIONS],
        pages=page_list,
        total_pages=len(page_list),
        defaults=slider_defaults(),
    )


@router.get("/investor-types", response_model=list[InvestorTypeSchema])
async def list_investor_types():
    return [InvestorTypeSchema.model_validate(asdict(t)) for t in INVESTOR_TYPES.values()]


@router.get("/glossary", response_model=list[GlossaryTermSchema])
async def get_glossary():
    return [GlossaryTermSchema.model_validate(t) for t in GLOSSARY]


@router.post("/allocation", response_model=AllocationResponse)
async def calculate_allocation(body: AllocationRequest):
    entries = build_allocation(body.risk_score, body.interests, body.style, body.investable_amount)
    recommendations = build_recommendations(
        body.risk_score, body.interests, body.style, body.investable_amount
    )
    return AllocationResponse(
        allocation=[AllocationEntrySchema.model_validate(asdict(e)) for e in entries],
        allocation_total=allocation_total(entries),
        recommendations=[RecommendationSchema.model_validate(asdict(r)) for r in recommendations],
    )


@router.post("/preview", response_model=ReportResponse)
async def preview_report(body: ReportRequest):
    """Compute a report without saving it."""
    report = generate_report(body.responses, body.user_name)
    return service.to_report_response(report)


@router.post("/report", response_model=SavedReportResponse, status_code=status.HTTP_201_CREATED)
async def create_report(
    body: ReportRequest,
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    report = generate_report(body.responses, body.user_name)
    plan = await service.save_report(db, current_user, report, body.responses)
    return service.restore_report(plan)


@router.get("/report", response_model=SavedReportResponse)
async def get_report(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    plan = await service.get_latest_plan(db, current_user.user_id)
    if not plan:
        raise HTTPException(status_code=404, detail="No saved investment plan")
    return service.restore_report(plan)


@router.delete("/report", status_code=status.HTTP_204_NO_CONTENT)
async def delete_report(
    current_user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    deleted = await service.delete_plan(db, current_user.user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="No saved investment plan")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
