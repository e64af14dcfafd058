"""
Note Service.

Business logic layer for notes. Builds entities from validated input,
drives the repository, and turns "nothing affected" into NotFoundError.
"""

from notes_api.core.exceptions import NotFoundError
from notes_api.core.utils import utc_now
from notes_api.models.note import Note
from notes_api.repositories.note import NoteRepository
from notes_api.schemas.note import NoteCreate, NoteUpdate
from notes_api.services.base import BaseService


class NoteService(BaseService):
    """
    Service for note business logic.

    Handles note creation, listing, retrieval, partial updates and
    deletion. Repository errors (ConflictError, NotFoundError,
    StoreError) propagate unchanged to the API layer.
    """

    def __init__(self, repo: NoteRepository) -> None:
        super().__init__()
        self.repo = repo

    async def create_note(self, data: NoteCreate) -> Note:
        """
        Create a new note.

        Both timestamps come from a single clock reading, so a fresh
        note always has created_at == updated_at.

        Args:
            data: Validated note creation data

        Returns:
            Stored note with generated id

        Raises:
            ConflictError: If the title is already taken
        """
        self._log_operation("Creating note", title=data.title)

        now = utc_now()
        note = await self.repo.insert(
            Note(
                title=data.title,
                content=data.content,
                category=data.category,
                published=data.published,
                created_at=now,
                updated_at=now,
            )
        )

        self._log_debug("Note created", note_id=note.id)
        return note

    async def list_notes(self, limit: int, offset: int = 0) -> list[Note]:
        """
        List one page of notes.

        Args:
            limit: Maximum number of notes
            offset: Number to skip for pagination

        Returns:
            At most `limit` notes
        """
        return await self.repo.find_page(limit=limit, offset=offset)

    async def get_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return await self.repo.find_by_id(note_id)

    async def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        """
        Apply the fields present in `data` to an existing note.

        Args:
            note_id: Note ID to update
            data: Validated update data

        Returns:
            The note as stored after the update

        Raises:
            NotFoundError: If note not found
            ConflictError: If the new title is already taken
        """
        await self.repo.find_by_id(note_id)

        changes = data.changes()
        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=sorted(changes),
        )

        changes["updated_at"] = utc_now()
        await self.repo.update_fields(note_id, changes)

        return await self.repo.find_by_id(note_id)

    async def delete_note(self, note_id: str) -> None:
        """
        Delete a note permanently.

        Raises:
            NotFoundError: If no note was deleted
        """
        self._log_operation("Deleting note", note_id=note_id)

        deleted = await self.repo.delete_by_id(note_id)
        if deleted == 0:
            raise NotFoundError(self.repo.not_found_message)
