"""SQLAlchemy models package: importing it populates Base.metadata."""

from app.models.base import TimestampedModel
from app.models.enums import PlanStatus
from app.models.investment_plan import InvestmentPlan

__all__ = [
    "InvestmentPlan",
    "PlanStatus",
    "TimestampedModel",
]
