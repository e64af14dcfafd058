"""
Note Repository.

Data access layer for notes. Handles all database operations
for the Note model.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.models.note import Note
from notes_api.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note model.

    Inherits the CRUD operations from BaseRepository. Pages are
    ordered oldest first so offsets stay meaningful between requests.
    """

    model = Note
    conflict_message = "Title already exists, please use another title"
    not_found_message = "No note with that ID exists"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    def _default_order(self) -> tuple[Any, ...]:
        return (Note.created_at.asc(), Note.id.asc())
