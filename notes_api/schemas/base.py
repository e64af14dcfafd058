"""
Base Schemas.

Response envelopes shared by every endpoint.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

from notes_api.core.validation import Violation

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Standard success envelope.

    All single-resource responses use this structure for consistency.
    """

    status: Literal["success"] = "success"
    data: DataT


class ErrorResponse(BaseModel):
    """
    Standard error envelope.

    status is "fail" for client errors and "error" for server errors.
    """

    status: Literal["fail", "error"]
    message: str
    errors: list[Violation] | None = None


# Example usage:
#
# @router.get("/notes/{note_id}", response_model=ApiResponse[NoteData])
# async def get_note(note_id: str):
#     note = await service.get_note(note_id)
#     return ApiResponse(data=NoteData(note=note))
