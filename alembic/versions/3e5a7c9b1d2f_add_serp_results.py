"""add serp result documents

Revision ID: 3e5a7c9b1d2f
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3e5a7c9b1d2f"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "serp_results",
        sa.Column("original_keyword", sa.String(length=500), nullable=False),
        sa.Column("normalized_keyword", sa.String(length=500), nullable=False),
        sa.Column("region", sa.String(length=10), nullable=False),
        sa.Column("language", sa.String(length=20), nullable=False),
        sa.Column("organic_results", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("people_also_ask", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("related_queries", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("ai_overview", sa.Text(), nullable=True),
        sa.Column("total_results", sa.Integer(), nullable=True),
        sa.Column("provider_response_id", sa.String(length=100), nullable=True),
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_serp_results_original_keyword"),
        "serp_results",
        ["original_keyword"],
        unique=False,
    )
    op.create_index(
        "ix_serp_results_lookup",
        "serp_results",
        ["normalized_keyword", "region", "language", "created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_serp_results_lookup", table_name="serp_results")
    op.drop_index(op.f("ix_serp_results_original_keyword"), table_name="serp_results")
    op.drop_table("serp_results")
