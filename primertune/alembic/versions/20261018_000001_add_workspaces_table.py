# File: primertune/alembic/versions/20261018_000001_add_workspaces_table.py
# Version: v0.1.0
"""
Create table: workspaces (stored primer workspaces, encoded state blob)
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261018_000001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "workspaces",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=True),
        sa.Column("primer_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("state_blob", sa.LargeBinary(), nullable=False),
    )


def downgrade():
    op.drop_table("workspaces")
