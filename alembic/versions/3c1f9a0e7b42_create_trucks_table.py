"""Create trucks table

Revision ID: 3c1f9a0e7b42
Revises:
Create Date: 2026-10-18 10:02:11.418230

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a0e7b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "trucks",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("license_number", sa.String(length=20), nullable=False),
        sa.Column("truck_type", sa.String(length=30), nullable=False),
        sa.Column("license_type", sa.String(length=30), nullable=False),
        sa.Column("production_year", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=True),
        sa.Column("gender", sa.String(length=20), nullable=True),
        sa.Column("skin_color", sa.String(length=50), nullable=True),
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
        sa.UniqueConstraint("license_number", name="uq_trucks_license_number"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("trucks")
