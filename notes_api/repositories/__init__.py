# Repositories package
from notes_api.repositories.base import BaseRepository
from notes_api.repositories.note import NoteRepository

__all__ = ["BaseRepository", "NoteRepository"]
