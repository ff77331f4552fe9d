"""
Top-level router.

Aggregates the endpoint routers.  The public paths (``/addSchool``,
``/listSchools`` and ``/``) are mounted at the root without a version
prefix because existing clients call them that way.
"""

from fastapi import APIRouter

from .endpoints import schools, welcome

router = APIRouter()

router.include_router(welcome.router, tags=["info"])
router.include_router(schools.router, tags=["schools"])
