"""InvestmentPlan model: the last generated questionnaire report per user."""

import uuid
from typing import Any

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import TimestampedModel
from app.models.enums import PlanStatus


class InvestmentPlan(TimestampedModel):
    __tablename__ = "investment_plans"
    __table_args__ = (
        Index("ix_investment_plans_user_id", "user_id", unique=True),
    )

    # Auth-provider user id (JWT `sub`); no FK, users live with the provider
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Report payload: allocation, recommendations, key metrics, narrative,
    # action plan, investment amount and the raw answers
    responses: Mapped[dict[str, Any]] = mapped_column(
        JSONB, nullable=False, default=dict, server_default="{}"
    )

    risk_score: Mapped[int] = mapped_column(Integer, nullable=False)
    risk_profile: Mapped[str] = mapped_column(String(50), nullable=False)
    investor_type: Mapped[str] = mapped_column(String(8), nullable=False)
    investor_type_name: Mapped[str] = mapped_column(String(100), nullable=False)
    plan_content: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    status: Mapped[PlanStatus] = mapped_column(
        nullable=False, default=PlanStatus.COMPLETE
    )
