"""
School endpoints.

``POST /addSchool`` registers a school and returns its generated id.
The body may be JSON or a URL-encoded/multipart form.
``GET /listSchools`` returns every school ranked by distance from the
``latitude``/``longitude`` query point.

Both routes answer with the ``{"success": true, ...}`` envelope on
success.  Errors are raised as ``ValidationError``/``StorageError``
and rendered as ``{"error": ...}`` by the handlers in ``main``.
"""

import math
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError as PayloadError

from school_management_api.app.core.config import settings
from school_management_api.app.core.db import SchoolStore, get_store
from school_management_api.app.core.exceptions import ValidationError
from school_management_api.app.schemas.school import (
    ErrorResponse,
    SchoolCreate,
    SchoolCreated,
    SchoolList,
    is_decimal_string,
)
from school_management_api.app.services.distance import Coordinate
from school_management_api.app.services.school_service import SchoolService, check_coordinate_range

router = APIRouter()

INVALID_INPUT_MESSAGE = "Invalid input data"

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def read_school_payload(request: Request) -> SchoolCreate:
    """Parse the ``/addSchool`` body, whether sent as JSON or as a form."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(FORM_CONTENT_TYPES):
            payload = dict(await request.form())
        else:
            payload = await request.json()
        return SchoolCreate.model_validate(payload)
    except (ValueError, PayloadError):
        raise ValidationError(INVALID_INPUT_MESSAGE) from None


def parse_query_point(latitude: Optional[str], longitude: Optional[str]) -> Coordinate:
    """Turn the raw query parameters into a validated ``Coordinate``."""
    if not latitude or not longitude:
        raise ValidationError("Latitude and longitude parameters are required")
    if not (is_decimal_string(latitude) and is_decimal_string(longitude)):
        raise ValidationError("Invalid latitude or longitude")
    lat = float(latitude)
    lng = float(longitude)
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValidationError("Invalid latitude or longitude")
    check_coordinate_range(lat, lng)
    return Coordinate(latitude=lat, longitude=lng)


@router.post("/addSchool", response_model=SchoolCreated, responses=ERROR_RESPONSES)
async def add_school(
    school: SchoolCreate = Depends(read_school_payload),
    store: SchoolStore = Depends(get_store),
) -> SchoolCreated:
    """Register a new school.

    Latitude and longitude must be finite numbers; their ranges are
    only checked when ``ENFORCE_SCHOOL_COORDINATE_RANGES`` is set.
    """
    school_id = await SchoolService.create_school(
        store,
        school,
        enforce_ranges=settings.enforce_school_coordinate_ranges,
    )
    return SchoolCreated(schoolId=school_id)


@router.get("/listSchools", response_model=SchoolList, responses=ERROR_RESPONSES)
async def list_schools(
    latitude: Optional[str] = Query(None),
    longitude: Optional[str] = Query(None),
    store: SchoolStore = Depends(get_store),
) -> SchoolList:
    """List all schools, nearest to the given point first.

    Each school carries a ``distance`` field in kilometres.
    """
    source = parse_query_point(latitude, longitude)
    schools = await SchoolService.list_schools_by_distance(store, source)
    return SchoolList(schools=schools)
