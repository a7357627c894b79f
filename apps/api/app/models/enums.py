"""PostgreSQL native enums for the domain models."""

import enum


class PlanStatus(str, enum.Enum):
    COMPLETE = "complete"
