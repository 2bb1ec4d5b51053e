"""
Photo API: Photo Route Handlers (Controller)
============================================

What:  HTTP handlers for the photo resource.
How:   Each handler makes one PhotoService call and picks the status code.
       Any FieldError from the service goes through error_switch(), which
       turns it into a 404 (identifier field) or a 400 (any other field).
Who:   Mounted by main.create_app() under /api/photos.

Routes:
    POST   /api/photos              create            201
    GET    /api/photos?page&limit   list              200
    GET    /api/photos/{id}         get by id         200
    PATCH  /api/photos/{id}         partial update    201 (204 on empty body)
    PUT    /api/photos/{id}         full replace      201
    DELETE /api/photos/{id}         delete            204
    POST   /api/photos/fake         fake record       201 (fake_router, optional)
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from photoapi.config import settings
from photoapi.database import get_db_session
from photoapi.exceptions import FieldError, NotFoundError, PhotoAPIError, ValidationError
from photoapi.schemas.photo import ErrorResponse, PhotoResponse
from photoapi.services.fake_service import fake_photo_factory
from photoapi.services.photo_service import IDENTIFIER_FIELD, photo_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/photos", tags=["Photos"])
fake_router = APIRouter(prefix="/api/photos", tags=["Development"])

NOT_FOUND_MESSAGE = "Photo ID not found"
BAD_INPUT_MESSAGE = "Check your input"

_ERROR_RESPONSES = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    404: {"description": "Photo not found", "model": ErrorResponse},
}


def error_switch(err: FieldError) -> PhotoAPIError:
    """
    Map a data-access failure to the API error the client sees.

    A failure on the identifier field means the photo does not exist (or the id
    could never have matched one), so it becomes a NotFoundError (404).
    Every other field failure is a ValidationError (400).
    """
    if err.field == IDENTIFIER_FIELD:
        return NotFoundError(
            resource="photo",
            message=NOT_FOUND_MESSAGE,
            context={"field": err.field, "reason": err.message},
        )
    return ValidationError(
        message=BAD_INPUT_MESSAGE,
        field=err.field,
        context={"reason": err.message},
    )


@router.post(
    "",
    status_code=201,
    response_model=PhotoResponse,
    responses={400: _ERROR_RESPONSES[400]},
    summary="Create a photo",
)
async def create_photo(
    data: Any = Body(default=None, description="Photo payload: price, url, date, theme"),
    db: AsyncSession = Depends(get_db_session),
) -> PhotoResponse:
    try:
        return await photo_service.create(db, data)
    except FieldError as err:
        raise error_switch(err) from err


@router.get(
    "",
    response_model=List[PhotoResponse],
    responses={400: _ERROR_RESPONSES[400]},
    summary="List photos page by page",
)
async def list_photos(
    response: Response,
    page: int = Query(default=1, ge=1, description="Page number, starting at 1"),
    limit: Optional[int] = Query(
        default=None,
        ge=1,
        description="Photos per page (default and maximum from configuration, 100 unless changed)",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> List[PhotoResponse]:
    """
    Return one page of photos.

    Example:
        GET /api/photos?page=3&limit=50  → photos 101-150

    Limits above the configured maximum are refused before touching the database.
    The total number of photos is returned in the X-Total-Count header.
    """
    if limit is None:
        limit = settings.pagination_default_limit

    if limit > settings.pagination_max_limit:
        raise ValidationError(
            message=f"Maximum limit is {settings.pagination_max_limit}",
            field="limit",
            context={"limit": limit},
        )

    try:
        photos = await photo_service.get_filtered(db, page, limit)
        total = await photo_service.count(db)
    except FieldError as err:
        raise error_switch(err) from err

    response.headers["X-Total-Count"] = str(total)
    return photos


@router.get(
    "/{photo_id}",
    response_model=PhotoResponse,
    responses={404: _ERROR_RESPONSES[404]},
    summary="Get a photo by ID",
)
async def get_photo(
    photo_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> PhotoResponse:
    try:
        return await photo_service.get_one(db, photo_id)
    except FieldError as err:
        raise error_switch(err) from err


@router.patch(
    "/{photo_id}",
    status_code=201,
    response_model=PhotoResponse,
    responses={204: {"description": "Empty body, nothing to update"}, **_ERROR_RESPONSES},
    summary="Update some fields of a photo",
)
async def update_photo(
    photo_id: str,
    data: Any = Body(default=None, description="Any subset of price, url, date, theme"),
    db: AsyncSession = Depends(get_db_session),
):
    """An empty body is a no-op: 204 without looking the photo up."""
    if not data:
        return Response(status_code=204)

    try:
        return await photo_service.update_one(db, photo_id, data)
    except FieldError as err:
        raise error_switch(err) from err


@router.put(
    "/{photo_id}",
    status_code=201,
    response_model=PhotoResponse,
    responses=_ERROR_RESPONSES,
    summary="Replace a photo",
)
async def replace_photo(
    photo_id: str,
    data: Any = Body(default=None, description="Photo payload: price, url, date, theme"),
    db: AsyncSession = Depends(get_db_session),
) -> PhotoResponse:
    try:
        return await photo_service.replace_one(db, photo_id, data)
    except FieldError as err:
        raise error_switch(err) from err


@router.delete(
    "/{photo_id}",
    status_code=204,
    response_class=Response,
    responses={404: _ERROR_RESPONSES[404]},
    summary="Delete a photo",
)
async def delete_photo(
    photo_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    try:
        await photo_service.delete_one(db, photo_id)
    except FieldError as err:
        raise error_switch(err) from err
    return Response(status_code=204)


@fake_router.post(
    "/fake",
    status_code=201,
    response_model=PhotoResponse,
    summary="Create a photo filled with random data",
    description="Development helper: stores one Faker-generated photo and returns it.",
)
async def create_fake_photo(
    db: AsyncSession = Depends(get_db_session),
) -> PhotoResponse:
    data = fake_photo_factory.build()
    logger.debug("Generated fake photo payload: %s", data)
    try:
        return await photo_service.create(db, data)
    except FieldError as err:
        raise error_switch(err) from err
