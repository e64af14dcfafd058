"""
Note Schemas.

Pydantic schemas for note request validation and response shaping.
The Field constraints on NoteCreate and NoteUpdate are the validation
rules enforced by notes_api.core.validation.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Note title, unique across all notes",
        examples=["My First Note"],
    )
    content: str = Field(
        ...,
        min_length=1,
        description="Note content",
        examples=["This is the content of my note."],
    )
    category: str | None = Field(
        default=None,
        max_length=100,
        description="Optional category",
    )
    published: bool = Field(
        default=False,
        description="Published status",
    )

    @field_validator("published", mode="before")
    @classmethod
    def null_published_is_false(cls, value: Any) -> Any:
        """Treat an explicit null the same as an absent flag."""
        return False if value is None else value


class NoteUpdate(BaseModel):
    """
    Schema for updating an existing note.

    Every field is optional. published distinguishes absent (None) from
    an explicit false.
    """

    title: str | None = Field(
        default=None,
        max_length=255,
        description="Note title",
    )
    content: str | None = Field(
        default=None,
        description="Note content",
    )
    category: str | None = Field(
        default=None,
        max_length=100,
        description="Note category",
    )
    published: bool | None = Field(
        default=None,
        description="Published status",
    )

    def changes(self) -> dict[str, Any]:
        """
        Return the fields to apply to an existing note.

        Absent fields, nulls and empty strings are left out; an explicit
        published=False is kept.
        """
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None and value != ""
        }


class NoteResponse(BaseModel):
    """Schema for a note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    category: str | None = Field(default=None, description="Note category")
    published: bool = Field(description="Whether the note is published")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class NoteData(BaseModel):
    """Payload wrapper for a single note: {"note": {...}}."""

    note: NoteResponse


class NoteListResponse(BaseModel):
    """Envelope for a page of notes."""

    status: Literal["success"] = "success"
    results: int
    notes: list[NoteResponse]
