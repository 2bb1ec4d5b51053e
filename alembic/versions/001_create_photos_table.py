"""Create photos table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

Creates the `photos` table backing the Photo model.
Rollback: downgrade() drops the table (all photo data is lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "photos",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False, comment="Opaque photo identifier"),
        sa.Column("price", sa.Numeric(10, 2), nullable=False, comment="Price of the photo"),
        sa.Column("url", sa.String(2048), nullable=False, comment="Location of the image file"),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False, comment="When the photo was taken"),
        sa.Column("theme", sa.String(100), nullable=False, comment="Subject of the photo"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this record was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this record was last written (UTC)",
        ),
        sa.CheckConstraint("price >= 0", name="ck_photos_price_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )

    # Pagination walks photos in (created_at, id) order
    op.create_index("idx_photos_created_at", "photos", ["created_at", "id"])


def downgrade() -> None:
    op.drop_index("idx_photos_created_at", table_name="photos")
    op.drop_table("photos")
