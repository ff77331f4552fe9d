"""
Business logic for schools.

``SchoolService`` creates school records and lists them, either
alphabetically or ranked by distance from a query point.  Every
method receives the ``SchoolStore`` to operate on instead of reaching
for a global connection, so callers decide which store is used.

Store failures surface as ``StorageError`` and are never retried or
masked by a fallback result.
"""

from __future__ import annotations

import logging
import math
import uuid
from typing import Any, Dict, List

from ..core.db import SchoolStore
from ..core.exceptions import ValidationError
from ..schemas.school import SchoolCreate, SchoolRead, SchoolWithDistance
from .distance import Coordinate, distance

logger = logging.getLogger(__name__)

LATITUDE_RANGE_ERROR = "Latitude must be between -90 and 90 degrees"
LONGITUDE_RANGE_ERROR = "Longitude must be between -180 and 180 degrees"


def check_coordinate_range(latitude: float, longitude: float) -> None:
    """Raise ``ValidationError`` if the point lies outside ±90/±180."""
    if latitude < -90 or latitude > 90:
        raise ValidationError(LATITUDE_RANGE_ERROR)
    if longitude < -180 or longitude > 180:
        raise ValidationError(LONGITUDE_RANGE_ERROR)


class SchoolService:
    """Create and list schools."""

    @classmethod
    async def create_school(
        cls,
        store: SchoolStore,
        data: SchoolCreate,
        enforce_ranges: bool = False,
    ) -> str:
        """Validate ``data``, persist it under a new id and return the id.

        The HTTP layer already validates the payload; the checks are
        repeated here because the service may be called directly.
        Coordinate ranges are only checked when ``enforce_ranges`` is
        true, matching the historical behaviour of ``/addSchool``.
        """
        name = data.name.strip() if isinstance(data.name, str) else ""
        address = data.address.strip() if isinstance(data.address, str) else ""
        if not name or not address:
            raise ValidationError("Name and address must not be empty")
        if not all(
            isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
            for value in (data.latitude, data.longitude)
        ):
            raise ValidationError("Latitude and longitude must be finite numbers")
        if enforce_ranges:
            check_coordinate_range(data.latitude, data.longitude)

        school_id = str(uuid.uuid4())
        store.insert(
            {
                "id": school_id,
                "name": name,
                "address": address,
                "latitude": float(data.latitude),
                "longitude": float(data.longitude),
            }
        )
        logger.info("Created school %s (%s)", school_id, name)
        return school_id

    @classmethod
    async def list_schools(cls, store: SchoolStore) -> List[SchoolRead]:
        """Return all schools ordered by name."""
        rows = store.select_all_ordered_by_name()
        return [cls._row_to_school_read(row) for row in rows]

    @classmethod
    async def list_schools_by_distance(
        cls, store: SchoolStore, source: Coordinate
    ) -> List[SchoolWithDistance]:
        """Return all schools, nearest to ``source`` first.

        ``sorted`` is stable, so schools at the same distance keep the
        order in which the store returned them.
        """
        ranked = [
            SchoolWithDistance(
                **cls._row_to_school_read(row).model_dump(),
                distance=distance(source, Coordinate(row["latitude"], row["longitude"])),
            )
            for row in store.select_all()
        ]
        return sorted(ranked, key=lambda school: school.distance)

    @staticmethod
    def _row_to_school_read(row: Dict[str, Any]) -> SchoolRead:
        return SchoolRead(
            id=row["id"],
            name=row["name"],
            address=row["address"],
            latitude=row["latitude"],
            longitude=row["longitude"],
        )
