"""
Photo API: Pydantic Request/Response Schemas
============================================

What:  Pydantic models defining the photo payloads and API responses.
How:   PhotoService validates raw request bodies against PhotoCreate/PhotoUpdate;
       routes serialize PhotoResponse and the error/health models.
Who:   PhotoService, the photo and health routes, and the fake data factory.

Design Decision:
    Request bodies reach the routes as plain JSON objects and are validated in
    the data-access layer, not by FastAPI's body parsing. That way a bad field
    surfaces as a FieldError naming the field, and the controller picks the
    status code from that name.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    UrlConstraints,
    field_serializer,
    field_validator,
)

from photoapi.models.photo import URL_MAX_LENGTH


# ══════════════════════════════════════════════════════════════════════════
# Request Models: photo payloads
# ══════════════════════════════════════════════════════════════════════════


# http(s) URL no longer than the url column
PhotoUrl = Annotated[HttpUrl, UrlConstraints(max_length=URL_MAX_LENGTH)]


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class PhotoCreate(BaseModel):
    """
    Full photo payload.

    Used by: POST /api/photos, PUT /api/photos/{id}, POST /api/photos/fake
    Unknown fields are rejected so typos fail loudly instead of being dropped.

    The url is stored in its normalized form: scheme and host are lowercased
    and a bare host gets a trailing slash ("https://Img.example.com" is stored
    as "https://img.example.com/"). Path, query and fragment are kept as sent.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2, description="Price of the photo")
    url: PhotoUrl = Field(description="Location of the image file")
    date: datetime = Field(description="When the photo was taken (ISO 8601)")
    theme: str = Field(min_length=1, max_length=100, description="Subject of the photo")

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        return _as_utc(v)


class PhotoUpdate(BaseModel):
    """
    Partial photo payload for PATCH /api/photos/{id}.

    Every field is optional, but a field that is sent must carry a value:
    explicit nulls are rejected because every column is NOT NULL.
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    url: Optional[PhotoUrl] = None
    date: Optional[datetime] = None
    theme: Optional[str] = Field(default=None, min_length=1, max_length=100)

    @field_validator("price", "url", "date", "theme", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field may not be null")
        return v

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v) if v is not None else v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PhotoResponse(BaseModel):
    """Full representation of a stored photo."""

    id: uuid.UUID = Field(description="Unique photo identifier (UUID)")
    price: Decimal = Field(description="Price of the photo")
    url: str = Field(description="Location of the image file")
    date: datetime = Field(description="When the photo was taken")
    theme: str = Field(description="Subject of the photo")
    created_at: datetime = Field(description="When the record was created (UTC)")
    updated_at: datetime = Field(description="When the record was last written (UTC)")

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Photo ID not found",
            "details": {"field": "id"},
            "request_id": "550e8400"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
