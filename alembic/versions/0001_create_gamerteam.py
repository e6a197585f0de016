"""create gamerteam

Revision ID: 0001
Revises:
Create Date: 2026-10-16 12:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "gamerteam",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("teamname", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("collegename", sa.String(length=100), nullable=False),
        sa.Column("membernameone", sa.String(length=100), nullable=False),
        sa.Column("membernametwo", sa.String(length=100), nullable=False),
        sa.Column("membernamethree", sa.String(length=100), nullable=False),
        sa.Column("membernamefour", sa.String(length=100), nullable=False),
        sa.Column("eventOne", sa.Float(), nullable=False, server_default="0"),
        sa.Column("eventTwo", sa.Float(), nullable=False, server_default="0"),
        sa.Column("eventThree", sa.Float(), nullable=False, server_default="0"),
        sa.Column("eventFour", sa.Float(), nullable=False, server_default="0"),
        sa.Column("eventFive", sa.Float(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_gamerteam_teamname", "gamerteam", ["teamname"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_gamerteam_teamname", table_name="gamerteam")
    op.drop_table("gamerteam")
