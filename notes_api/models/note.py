"""
Note Model.

Database model for notes.
"""

from sqlalchemy import String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from notes_api.models.base import Base, TimestampMixin, UUIDMixin


class Note(UUIDMixin, TimestampMixin, Base):
    """
    Note database model.

    Titles are unique across all notes; the unique index is what
    turns a duplicate title into a ConflictError on insert or update.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    category: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )
    published: Mapped[bool] = mapped_column(
        default=False,
        server_default=false(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
