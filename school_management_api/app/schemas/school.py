"""
Pydantic models for school data.

``SchoolCreate`` describes the ``/addSchool`` request body.  Names and
addresses are trimmed before the emptiness check; coordinates accept
JSON numbers or plain decimal strings but must be finite, and booleans
are rejected.  Coordinate ranges are deliberately not checked here (see
``SchoolService.create_school``).

``SchoolRead`` and ``SchoolWithDistance`` are the shapes returned to
clients; ``SchoolCreated`` and ``SchoolList`` wrap them in the
``success`` envelope the API has always used.
"""

import re
from typing import Any, List

from pydantic import BaseModel, Field, field_validator

# Optional sign, ASCII digits with an optional fraction, optional exponent.
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def is_decimal_string(value: str) -> bool:
    """Return True if ``value`` is a plain decimal number such as ``-12.5e3``."""
    return DECIMAL_PATTERN.fullmatch(value.strip()) is not None


class SchoolBase(BaseModel):
    name: str = Field(..., examples=["Oak Elementary"])
    address: str = Field(..., examples=["1 Oak St"])
    latitude: float = Field(..., allow_inf_nan=False, examples=[40.0])
    longitude: float = Field(..., allow_inf_nan=False, examples=[-75.0])


class SchoolCreate(SchoolBase):
    """Schema for registering a school."""

    @field_validator("name", "address")
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def require_number(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError("must be a number")
        if isinstance(v, str) and not is_decimal_string(v):
            raise ValueError("must be a decimal number")
        return v.strip() if isinstance(v, str) else v


class SchoolRead(SchoolBase):
    """Schema for a stored school."""

    id: str

    model_config = {
        "from_attributes": True,
    }


class SchoolWithDistance(SchoolRead):
    """A stored school annotated with its distance (km) from the query point."""

    distance: float = Field(..., ge=0)


class SchoolCreated(BaseModel):
    success: bool = True
    schoolId: str


class SchoolList(BaseModel):
    success: bool = True
    schools: List[SchoolWithDistance]


class ErrorResponse(BaseModel):
    error: str
