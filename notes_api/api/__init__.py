"""
API Router.

Aggregates all endpoint routers mounted under the API prefix.
"""

from fastapi import APIRouter

from notes_api.api import notes

router = APIRouter()

router.include_router(notes.router, prefix="/notes", tags=["notes"])
