"""create teachers and students

Revision ID: 3f1c9a7d2b60
Revises:
Create Date: 2026-10-17 10:12:41.208331

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b60'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "teachers",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_teachers_name", "teachers", ["name"], unique=True)

    op.create_table(
        "students",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "assigned_teacher_id",
            sa.String(length=36),
            sa.ForeignKey("teachers.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("progress_report_grade", sa.Integer(), nullable=True),
        sa.Column("final_report_grade", sa.Integer(), nullable=True),
        sa.Column("finalized", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint(
            "progress_report_grade IS NULL OR progress_report_grade BETWEEN 0 AND 100",
            name="ck_students_progress_grade_range",
        ),
        sa.CheckConstraint(
            "final_report_grade IS NULL OR final_report_grade BETWEEN 0 AND 100",
            name="ck_students_final_grade_range",
        ),
        sa.CheckConstraint(
            "NOT finalized OR final_report_grade IS NOT NULL",
            name="ck_students_finalized_has_final_grade",
        ),
    )
    op.create_index("ix_students_name", "students", ["name"])
    op.create_index("ix_students_assigned_teacher_id", "students", ["assigned_teacher_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_students_assigned_teacher_id", table_name="students")
    op.drop_index("ix_students_name", table_name="students")
    op.drop_table("students")
    op.drop_index("ix_teachers_name", table_name="teachers")
    op.drop_table("teachers")
