"""
Top-level package for the School Management API.

All functionality lives in the ``app`` subpackage; import the ASGI
application as ``school_management_api.app.main:app``.
"""

__all__ = []
