"""
Note Repository.

SQLAlchemy implementation of the NoteRepository port. Converts between
NoteModel rows and Note domain entities; never commits, the unit of work
owns the transaction.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.logging import get_logger
from modules.backend.domain.note import Note, NoteId
from modules.backend.models.note import NoteModel
from modules.backend.repositories.base import NoteRepository
from modules.backend.repositories.mappers import NoteMapper

logger = get_logger(__name__)


class SqlAlchemyNoteRepository(NoteRepository):
    """Repository for Note entities backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.mapper = NoteMapper()

    async def save(self, note: Note) -> Note:
        """
        Insert or update a note.

        Existence is checked before choosing insert or update. This is
        not atomic under concurrent writers for the same id; the last
        write wins.

        Args:
            note: Note to persist

        Returns:
            The note as stored
        """
        existing = await self.session.get(NoteModel, str(note.id))
        if existing is None:
            orm_model = self.mapper.to_orm(note)
            self.session.add(orm_model)
        else:
            orm_model = self.mapper.to_orm(note, existing)

        await self.session.flush()
        logger.debug(
            "Note persisted",
            extra={"note_id": str(note.id), "inserted": existing is None},
        )
        return self.mapper.to_domain(orm_model)

    async def find_by_id(self, note_id: NoteId) -> Note | None:
        result = await self.session.execute(
            select(NoteModel).where(NoteModel.id == str(note_id))
        )
        orm_model = result.scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    async def find_all(self) -> list[Note]:
        """
        Get all notes.

        Rows come back ordered by creation time, but the port makes no
        ordering promise and callers must not rely on it.
        """
        result = await self.session.execute(
            select(NoteModel).order_by(NoteModel.created_at)
        )
        return [self.mapper.to_domain(row) for row in result.scalars().all()]

    async def exists_by_id(self, note_id: NoteId) -> bool:
        result = await self.session.execute(
            select(NoteModel.id).where(NoteModel.id == str(note_id))
        )
        return result.scalar_one_or_none() is not None

    async def delete_by_id(self, note_id: NoteId) -> None:
        await self.session.execute(
            delete(NoteModel).where(NoteModel.id == str(note_id))
        )
        await self.session.flush()
