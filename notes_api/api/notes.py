"""
Notes API Endpoints.

REST API endpoints for note management. Request bodies are taken as raw
JSON and validated with parse_payload so that rule failures come back as
400 with a list of violations.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from notes_api.core.dependencies import NoteServiceDep
from notes_api.core.pagination import PageParams, get_page_params
from notes_api.core.validation import parse_payload
from notes_api.schemas.base import ApiResponse
from notes_api.schemas.note import (
    NoteCreate,
    NoteData,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)

router = APIRouter()


def _note_envelope(note: Any) -> ApiResponse[NoteData]:
    return ApiResponse(data=NoteData(note=NoteResponse.model_validate(note)))


@router.post(
    "",
    response_model=ApiResponse[NoteData],
    status_code=201,
    summary="Create a note",
    description="Create a new note. Titles must be unique.",
)
async def create_note(
    service: NoteServiceDep,
    payload: Any = Body(default=None),
) -> ApiResponse[NoteData]:
    """Create a new note."""
    data = parse_payload(NoteCreate, payload)
    note = await service.create_note(data)
    return _note_envelope(note)


@router.get(
    "",
    response_model=NoteListResponse,
    summary="List notes",
    description="Get one page of notes. `page` starts at 1.",
)
async def list_notes(
    service: NoteServiceDep,
    pagination: PageParams = Depends(get_page_params),
) -> NoteListResponse:
    """List notes page by page."""
    notes = await service.list_notes(
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return NoteListResponse(
        results=len(notes),
        notes=[NoteResponse.model_validate(note) for note in notes],
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[NoteData],
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(
    note_id: str,
    service: NoteServiceDep,
) -> ApiResponse[NoteData]:
    """Get a note by ID."""
    note = await service.get_note(note_id)
    return _note_envelope(note)


@router.patch(
    "/{note_id}",
    response_model=ApiResponse[NoteData],
    summary="Update a note",
    description="Update an existing note. Only provided, non-empty fields are updated.",
)
async def update_note(
    note_id: str,
    service: NoteServiceDep,
    payload: Any = Body(default=None),
) -> ApiResponse[NoteData]:
    """Update a note."""
    data = parse_payload(NoteUpdate, payload)
    note = await service.update_note(note_id, data)
    return _note_envelope(note)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a note",
    description="Permanently delete a note.",
)
async def delete_note(
    note_id: str,
    service: NoteServiceDep,
) -> Response:
    """Delete a note."""
    await service.delete_note(note_id)
    return Response(status_code=204)
