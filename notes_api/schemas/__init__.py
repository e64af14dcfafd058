# Pydantic schemas package
from notes_api.schemas.base import ApiResponse, ErrorResponse
from notes_api.schemas.note import (
    NoteCreate,
    NoteData,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "NoteCreate",
    "NoteData",
    "NoteListResponse",
    "NoteResponse",
    "NoteUpdate",
]
