"""Investor profile Pydantic schemas."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# ── Questionnaire ────────────────────────────────────────────────────────────


class _Attrs(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class SectionSchema(_Attrs):
    key: str
    title: str
    description: str


class OptionSchema(_Attrs):
    value: str
    label: str
    description: str = ""


class ScenarioChoiceSchema(_Attrs):
    label: str
    description: str
    traits: list[str]


class _QuestionBase(_Attrs):
    id: str
    section: str
    prompt: str
    subtitle: str


class TextQuestionSchema(_QuestionBase):
    kind: Literal["text"] = "text"
    placeholder: str = ""
    multiline: bool = False


class SingleChoiceQuestionSchema(_QuestionBase):
    kind: Literal["single_choice"] = "single_choice"
    options: list[OptionSchema]


class MultiChoiceQuestionSchema(_QuestionBase):
    kind: Literal["multi_choice"] = "multi_choice"
    options: list[OptionSchema]
    exclusive_value: str | None = None


class SliderQuestionSchema(_QuestionBase):
    kind: Literal["slider"] = "slider"
    minimum: float
    maximum: float
    step: float
    default: int
    unit: str
    steps: list[int] = []


class ScenarioQuestionSchema(_QuestionBase):
    # per-dimension deltas stay server-side
    kind: Literal["scenario"] = "scenario"
    choice_a: ScenarioChoiceSchema
    choice_b: ScenarioChoiceSchema


QuestionSchema = Annotated[
    Union[
        TextQuestionSchema,
        SingleChoiceQuestionSchema,
        MultiChoiceQuestionSchema,
        SliderQuestionSchema,
        ScenarioQuestionSchema,
    ],
    Field(discriminator="kind"),
]


class PageSchema(BaseModel):
    index: int
    section: str
    title: str
    questions: list[QuestionSchema]


class QuestionnaireResponse(BaseModel):
    sections: list[SectionSchema]
    pages: list[PageSchema]
    total_pages: int
    defaults: dict[str, int]


class GlossaryTermSchema(_Attrs):
    key: str
    term: str
    definition: str
    example: str = ""


# ── Investor types ───────────────────────────────────────────────────────────


class SuggestedAllocationSchema(_Attrs):
    stocks: int
    bonds: int
    alternatives: int
    cash: int


class InvestorTypeSchema(_Attrs):
    code: str
    name: str
    tagline: str
    description: str
    strengths: list[str]
    challenges: list[str]
    famous_examples: list[str]
    suggested_allocation: SuggestedAllocationSchema


class DimensionsSchema(_Attrs):
    risk: int = Field(ge=0, le=100)
    decision: int = Field(ge=0, le=100)
    time: int = Field(ge=0, le=100)
    focus: int = Field(ge=0, le=100)


class InvestorTypeResult(InvestorTypeSchema):
    dimensions: DimensionsSchema


# ── Report ───────────────────────────────────────────────────────────────────


class RiskProfileSchema(_Attrs):
    score: int = Field(ge=10, le=90)
    label: str
    description: str


class SubcategorySchema(_Attrs):
    name: str
    percentage: int


class AllocationEntrySchema(_Attrs):
    category: str
    percentage: int
    color: str
    subcategories: list[SubcategorySchema] = []


class RecommendationSchema(_Attrs):
    type: str
    ticker: str
    name: str
    category: str
    reason: str
    expense_ratio: str | None = None
    allocation: int | None = None


class ActionPlanStepSchema(_Attrs):
    priority: int
    title: str
    description: str
    timeframe: str


class KeyMetricsSchema(_Attrs):
    expected_return: float
    volatility: float
    max_drawdown: float
    sharpe_ratio: float
    time_horizon: str
    expected_return_display: str
    volatility_display: str
    max_drawdown_display: str
    sharpe_ratio_display: str


class NarrativeSchema(_Attrs):
    executive: str
    risk_analysis: str
    allocation_rationale: str
    implementation_guide: str
    rebalancing: str


class ReportRequest(BaseModel):
    responses: dict[str, Any] = Field(default_factory=dict)
    user_name: str | None = Field(default=None, max_length=255)


class ReportResponse(BaseModel):
    user_name: str
    risk_profile: RiskProfileSchema
    investor_type: InvestorTypeResult
    allocation: list[AllocationEntrySchema]
    allocation_total: int
    recommendations: list[RecommendationSchema]
    key_metrics: KeyMetricsSchema
    narrative: NarrativeSchema
    action_plan: list[ActionPlanStepSchema]
    investment_amount: float


class SavedReportResponse(ReportResponse):
    id: uuid.UUID
    generated_at: datetime
    responses: dict[str, Any]
    plan_content: str


# ── Allocation calculator ────────────────────────────────────────────────────


class AllocationRequest(BaseModel):
    risk_score: int = Field(ge=10, le=90)
    interests: list[str] = []
    style: str = "passive"
    investable_amount: float = Field(default=50_000, ge=0, allow_inf_nan=False)


class AllocationResponse(BaseModel):
    allocation: list[AllocationEntrySchema]
    allocation_total: int
    recommendations: list[RecommendationSchema]
