"""
Photo API: Photo Service (Data Access)
======================================

What:  CRUD operations for the Photo model, with payload validation.
How:   Validates raw JSON objects against the photo schemas, runs async
       SQLAlchemy queries, and returns PhotoResponse objects.
Who:   Called by the photo controller (routes/photos.py).

Error Contract:
    Every expected failure is raised as a FieldError naming the field that failed:
        - malformed or unknown photo id  → FieldError("id")
        - invalid or unknown payload key → FieldError("<key>")
        - payload is not a JSON object   → FieldError("body")
    SQLAlchemy failures are wrapped in DatabaseError; their details are logged
    and never returned to the client.

PhotoService is stateless: it receives the session for each call.
"""

import logging
import uuid
from typing import Any, Dict, List, NoReturn, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from photoapi.exceptions import DatabaseError, FieldError
from photoapi.models.photo import Photo
from photoapi.schemas.photo import PhotoCreate, PhotoResponse, PhotoUpdate

logger = logging.getLogger(__name__)

# Name of the identifier field, as reported in FieldError.field
IDENTIFIER_FIELD = "id"

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class PhotoService:
    """
    Data-access layer for photo operations.

    Responsibilities:
        - create(): insert a validated photo
        - get_filtered(): one page of photos
        - count(): total number of photos
        - get_one(): single photo lookup
        - update_one(): partial update
        - replace_one(): full replace
        - delete_one(): delete
    """

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _parse_id(photo_id: Any) -> uuid.UUID:
        if isinstance(photo_id, uuid.UUID):
            return photo_id
        try:
            return uuid.UUID(str(photo_id))
        except ValueError:
            raise FieldError(
                IDENTIFIER_FIELD,
                message=f"'{photo_id}' is not a valid photo ID",
            ) from None

    @staticmethod
    def _validate(schema: Type[SchemaT], data: Any) -> SchemaT:
        """
        Validate a raw JSON object against a photo schema.

        The identifier comes from the URL, never from the body, so an "id" key in
        the body is ignored rather than reported against the identifier field.
        """
        if not isinstance(data, dict):
            raise FieldError("body", message="Request body must be a JSON object")

        payload = {key: value for key, value in data.items() if key != IDENTIFIER_FIELD}
        try:
            return schema.model_validate(payload)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else "body"
            raise FieldError(field, message=first["msg"]) from e

    @staticmethod
    def _values(payload: BaseModel) -> Dict[str, Any]:
        """Column values from a validated payload (only the fields that were sent)."""
        values = payload.model_dump(exclude_unset=True)
        if "url" in values:
            values["url"] = str(values["url"])
        return values

    async def _fetch(self, db: AsyncSession, photo_id: uuid.UUID) -> Photo:
        photo = await db.get(Photo, photo_id)
        if photo is None:
            raise FieldError(
                IDENTIFIER_FIELD,
                message=f"No photo with ID '{photo_id}'",
            )
        return photo

    @staticmethod
    def _database_failure(action: str, e: SQLAlchemyError, **context: Any) -> NoReturn:
        logger.error("Database error while %s: %s", action, str(e), exc_info=True)
        context["error_type"] = type(e).__name__
        raise DatabaseError(
            message=f"Could not complete the request while {action}. Please try again.",
            context=context,
        ) from e

    # ── Operations ────────────────────────────────────────────────────────

    async def create(self, db: AsyncSession, data: Any) -> PhotoResponse:
        """
        Insert a new photo.

        Args:
            db: Async database session
            data: Raw JSON object with price, url, date and theme

        Raises:
            FieldError: a field is missing, invalid or unknown
            DatabaseError: the insert failed
        """
        payload = self._validate(PhotoCreate, data)
        photo = Photo(**self._values(payload))
        try:
            db.add(photo)
            await db.flush()
            await db.refresh(photo)
        except SQLAlchemyError as e:
            self._database_failure("creating a photo", e)

        logger.info("Photo created: %s", photo.id)
        return PhotoResponse.model_validate(photo)

    async def get_filtered(self, db: AsyncSession, page: int, limit: int) -> List[PhotoResponse]:
        """
        Return one page of photos, oldest first.

        Page numbers start at 1: page N holds records (N-1)*limit .. N*limit-1.
        A page past the end is an empty list, not an error.

        Raises:
            FieldError: page or limit is below 1
        """
        if page < 1:
            raise FieldError("page", message="page must be at least 1")
        if limit < 1:
            raise FieldError("limit", message="limit must be at least 1")

        query = (
            select(Photo)
            .order_by(Photo.created_at, Photo.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        try:
            result = await db.execute(query)
            photos = list(result.scalars().all())
        except SQLAlchemyError as e:
            self._database_failure("listing photos", e, page=page, limit=limit)

        return [PhotoResponse.model_validate(photo) for photo in photos]

    async def count(self, db: AsyncSession) -> int:
        """Total number of stored photos."""
        try:
            result = await db.execute(select(func.count(Photo.id)))
        except SQLAlchemyError as e:
            self._database_failure("counting photos", e)
        return result.scalar() or 0

    async def get_one(self, db: AsyncSession, photo_id: Any) -> PhotoResponse:
        """
        Retrieve a single photo by ID.

        Raises:
            FieldError("id"): the id is malformed or unknown
        """
        pk = self._parse_id(photo_id)
        try:
            photo = await self._fetch(db, pk)
        except SQLAlchemyError as e:
            self._database_failure("fetching a photo", e, photo_id=str(pk))
        return PhotoResponse.model_validate(photo)

    async def update_one(self, db: AsyncSession, photo_id: Any, data: Any) -> PhotoResponse:
        """
        Apply a partial update; fields absent from `data` keep their values.

        Raises:
            FieldError("id"): the id is malformed or unknown
            FieldError: a sent field is invalid or unknown
        """
        pk = self._parse_id(photo_id)
        payload = self._validate(PhotoUpdate, data)
        try:
            photo = await self._fetch(db, pk)
            for name, value in self._values(payload).items():
                setattr(photo, name, value)
            await db.flush()
            await db.refresh(photo)
        except SQLAlchemyError as e:
            self._database_failure("updating a photo", e, photo_id=str(pk))

        logger.info("Photo updated: %s (%s)", pk, ", ".join(sorted(payload.model_fields_set)))
        return PhotoResponse.model_validate(photo)

    async def replace_one(self, db: AsyncSession, photo_id: Any, data: Any) -> PhotoResponse:
        """
        Overwrite every payload field of an existing photo.

        Raises:
            FieldError("id"): the id is malformed or unknown
            FieldError: a field is missing, invalid or unknown
        """
        pk = self._parse_id(photo_id)
        payload = self._validate(PhotoCreate, data)
        try:
            photo = await self._fetch(db, pk)
            for name, value in self._values(payload).items():
                setattr(photo, name, value)
            await db.flush()
            await db.refresh(photo)
        except SQLAlchemyError as e:
            self._database_failure("replacing a photo", e, photo_id=str(pk))

        logger.info("Photo replaced: %s", pk)
        return PhotoResponse.model_validate(photo)

    async def delete_one(self, db: AsyncSession, photo_id: Any) -> None:
        """
        Delete a photo.

        Raises:
            FieldError("id"): the id is malformed or unknown
        """
        pk = self._parse_id(photo_id)
        try:
            photo = await self._fetch(db, pk)
            await db.delete(photo)
            await db.flush()
        except SQLAlchemyError as e:
            self._database_failure("deleting a photo", e, photo_id=str(pk))

        logger.info("Photo deleted: %s", pk)


# ── Singleton Instance ────────────────────────────────────────────────────
photo_service = PhotoService()
