"""
Note Schemas.

Pydantic schemas for note API request/response validation. Request
schemas only check shape and size; blank titles and content are
rejected by the Note entity so the error carries its domain kind.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from modules.backend.domain.note import Note


class NoteCommand(BaseModel):
    """Fields shared by create and update requests."""

    title: str = Field(
        ...,
        max_length=255,
        description="Note title",
        examples=["My First Note"],
    )
    content: str = Field(
        ...,
        description="Note content",
        examples=["This is the content of my note."],
    )
    tags: list[str] | None = Field(
        default=None,
        description="Free-form tags; order and duplicates are kept",
        examples=[["work", "ideas"]],
    )


class NoteCreate(NoteCommand):
    """Schema for creating a new note."""


class NoteUpdate(NoteCommand):
    """Schema for replacing an existing note's title, content and tags."""


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: UUID = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    tags: list[str] = Field(description="Note tags")

    @classmethod
    def from_domain(cls, note: Note) -> "NoteResponse":
        """Build a response from a domain note."""
        return cls(
            id=note.id.value,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
            tags=list(note.tags),
        )
