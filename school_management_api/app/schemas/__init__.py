"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store's row dictionaries so the API
representation can change without touching persistence.
"""
