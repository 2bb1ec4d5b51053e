"""
Photo API: Photo SQLAlchemy Model
=================================

What:  ORM model representing the `photos` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by PhotoService for CRUD operations.

Table Design:
    - id: UUID generated in Python (works on PostgreSQL and SQLite alike)
    - price: NUMERIC(10, 2), never negative
    - url: where the image lives; this service stores references, not bytes
    - date: when the photo was taken (client-supplied, timezone-aware)
    - theme: short free-text subject
    - created_at / updated_at: server-managed UTC timestamps
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Index, Numeric, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from photoapi.database import Base

# Longest image URL the url column holds
URL_MAX_LENGTH = 2048


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Photo(Base):
    """
    A single photo record.

    Query Patterns:
        - Page through photos: ORDER BY created_at, id LIMIT :limit OFFSET :offset
          → idx_photos_created_at
        - Get single photo: WHERE id = :uuid → primary key
    """

    __tablename__ = "photos"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Opaque photo identifier",
    )

    # ── Payload Fields ────────────────────────────────────────────────────
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Price of the photo",
    )
    url: Mapped[str] = mapped_column(
        String(URL_MAX_LENGTH),
        nullable=False,
        comment="Location of the image file",
    )
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="When the photo was taken",
    )
    theme: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Subject of the photo",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this record was created (UTC)",
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this record was last written (UTC)",
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_photos_price_non_negative"),
        Index("idx_photos_created_at", "created_at", "id"),
    )

    def __repr__(self) -> str:
        return f"<Photo(id={self.id}, theme='{self.theme}', price={self.price})>"
