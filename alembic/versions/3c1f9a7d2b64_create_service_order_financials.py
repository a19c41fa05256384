"""Create service_order_financials

Revision ID: 3c1f9a7d2b64
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "service_order_financials",
        sa.Column("service_order_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("payment_config", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
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
        sa.PrimaryKeyConstraint("service_order_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("service_order_financials")
