"""initial icebreaker schema

Revision ID: base_0001
Revises:
Create Date: 2026-10-19 10:12:41.502118

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "base_0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("difficulty", sa.String(length=16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_questions"),
    )
    op.create_index("ix_questions_category", "questions", ["category"])
    op.create_index("ix_questions_difficulty", "questions", ["difficulty"])

    op.create_table(
        "teams",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("color", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_teams"),
        sa.UniqueConstraint("name", name="uq_teams_name"),
    )

    for table in ("usage_history", "skipped_questions"):
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("team_id", sa.Integer(), nullable=False),
            sa.Column("question_id", sa.Integer(), nullable=False),
            sa.Column("user_name", sa.Text(), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
            sa.ForeignKeyConstraint(
                ["team_id"], ["teams.id"], name=f"fk_{table}_team_id_teams", ondelete="CASCADE"
            ),
            sa.ForeignKeyConstraint(
                ["question_id"],
                ["questions.id"],
                name=f"fk_{table}_question_id_questions",
                ondelete="CASCADE",
            ),
            sa.PrimaryKeyConstraint("id", name=f"pk_{table}"),
            sa.UniqueConstraint("team_id", "question_id", name=f"uq_{table}_team_id_question_id"),
        )
        op.create_index(f"ix_{table}_team_id", table, ["team_id"])
        op.create_index(f"ix_{table}_question_id", table, ["question_id"])


def downgrade() -> None:
    for table in ("skipped_questions", "usage_history"):
        op.drop_index(f"ix_{table}_question_id", table_name=table)
        op.drop_index(f"ix_{table}_team_id", table_name=table)
        op.drop_table(table)
    op.drop_table("teams")
    op.drop_index("ix_questions_difficulty", table_name="questions")
    op.drop_index("ix_questions_category", table_name="questions")
    op.drop_table("questions")
