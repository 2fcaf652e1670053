"""create users and word pairs

``users`` is owned by the identity service. This revision only creates it
when the database does not have it yet, and ``downgrade`` leaves it in place.

Revision ID: 3c1f0a7d9b2e
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d9b2e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if "users" not in tables:
        op.create_table(
            "users",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("username", sa.String(length=50), nullable=False),
            sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        with op.batch_alter_table("users", schema=None) as batch_op:
            batch_op.create_index(batch_op.f("ix_users_email"), ["email"], unique=True)
            batch_op.create_index(batch_op.f("ix_users_username"), ["username"], unique=True)

    op.create_table(
        "word_pairs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("polish_word", sa.String(length=255), nullable=False),
        sa.Column("ukrainian_word", sa.String(length=255), nullable=False),
        sa.Column("correct_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("incorrect_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint("correct_count >= 0", name="ck_word_pairs_correct_count"),
        sa.CheckConstraint("incorrect_count >= 0", name="ck_word_pairs_incorrect_count"),
    )
    with op.batch_alter_table("word_pairs", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_word_pairs_user_id"), ["user_id"], unique=False)


def downgrade() -> None:
    with op.batch_alter_table("word_pairs", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_word_pairs_user_id"))
    op.drop_table("word_pairs")
