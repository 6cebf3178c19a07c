"""create people and tasks tables"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_people_tasks"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "people",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.String(length=200), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_table(
        "tasks",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column(
            "person_id",
            sa.Integer(),
            sa.ForeignKey("people.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False, server_default=""),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_tasks_person_id", "tasks", ["person_id"], unique=False)
    op.create_index("ix_tasks_category", "tasks", ["category"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_tasks_category", table_name="tasks")
    op.drop_index("ix_tasks_person_id", table_name="tasks")
    op.drop_table("tasks")
    op.drop_table("people")
