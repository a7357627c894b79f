"""Create investment_plans table.

Revision ID: 0001_investment_plans
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "0001_investment_plans"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

plan_status = postgresql.ENUM("COMPLETE", name="planstatus", create_type=False)


def upgrade() -> None:
    plan_status.create(op.get_bind(), checkfirst=True)
    op.create_table(
        "investment_plans",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            nullable=False,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "responses",
            postgresql.JSONB(),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("risk_score", sa.Integer(), nullable=False),
        sa.Column("risk_profile", sa.String(50), nullable=False),
        sa.Column("investor_type", sa.String(8), nullable=False),
        sa.Column("investor_type_name", sa.String(100), nullable=False),
        sa.Column("plan_content", sa.Text(), nullable=False, server_default=""),
        sa.Column("status", plan_status, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_investment_plans_user_id", "investment_plans", ["user_id"], unique=True
    )


def downgrade() -> None:
    op.drop_index("ix_investment_plans_user_id", table_name="investment_plans")
    op.drop_table("investment_plans")
    plan_status.drop(op.get_bind(), checkfirst=True)
