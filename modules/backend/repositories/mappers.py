"""Mapper for Note ORM ↔ Domain conversion."""

from modules.backend.domain.note import Note, NoteId
from modules.backend.models.note import NoteModel


class NoteMapper:
    """Mapper for Note ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: NoteModel) -> Note:
        """Convert ORM model to domain entity."""
        return Note.reconstitute(
            id=NoteId.of(orm_model.id),
            title=orm_model.title,
            content=orm_model.content,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            tags=orm_model.tags,
        )

    def to_orm(self, note: Note, orm_model: NoteModel | None = None) -> NoteModel:
        """
        Convert domain entity to ORM model.

        When an existing row is given its mutable fields are overwritten
        in place; created_at is never rewritten.
        """
        if orm_model is not None:
            orm_model.title = note.title
            orm_model.content = note.content
            orm_model.updated_at = note.updated_at
            orm_model.tags = list(note.tags)
            return orm_model

        return NoteModel(
            id=str(note.id),
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
            tags=list(note.tags),
        )
