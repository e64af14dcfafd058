"""
FastAPI Dependencies.

Shared dependencies for request handling. Each request gets its own
session, repository and service; nothing is shared between requests
except the engine's connection pool.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.core.database import get_db_session
from notes_api.repositories.note import NoteRepository
from notes_api.services.note import NoteService

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_note_repository(db: DbSession) -> NoteRepository:
    """Build the note repository on the request's session."""
    return NoteRepository(db)


def get_note_service(
    repo: Annotated[NoteRepository, Depends(get_note_repository)],
) -> NoteService:
    """Build the note service around the request's repository."""
    return NoteService(repo)


NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
