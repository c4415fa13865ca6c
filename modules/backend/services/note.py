"""
Note Service.

Application service for notes. Implements the five note use cases
(create, get, list, update, delete), each inside one unit of work.
Validation lives in the Note entity; not-found signaling lives here.
"""

from collections.abc import Iterable
from uuid import UUID

from modules.backend.core.unit_of_work import UnitOfWork
from modules.backend.domain.exceptions import NoteNotFoundError
from modules.backend.domain.note import Note, NoteId
from modules.backend.repositories.base import NoteRepository
from modules.backend.services.base import BaseService

NoteIdLike = NoteId | UUID | str


class NoteService(BaseService):
    """
    Service for note use cases.

    Depends only on the NoteRepository port and a UnitOfWork, so the
    storage technology can be swapped without touching this class.
    """

    def __init__(self, repository: NoteRepository, uow: UnitOfWork) -> None:
        super().__init__(uow)
        self.repo = repository

    async def create_note(
        self,
        title: str | None,
        content: str | None,
        tags: Iterable[str] | None = None,
    ) -> Note:
        """
        Create a new note.

        Args:
            title: Note title
            content: Note content
            tags: Optional tags, order and duplicates kept

        Returns:
            Persisted note

        Raises:
            NoteValidationError: If title or content is missing or blank
        """
        self._log_operation("Creating note", title=title)

        async with self.uow:
            note = Note.create(title, content, tags)
            saved = await self._execute_db_operation(
                "create_note",
                self.repo.save(note),
            )
            await self._commit("create_note")

        self._log_debug("Note created", note_id=str(saved.id))
        return saved

    async def get_note(self, note_id: NoteIdLike) -> Note:
        """
        Get a note by ID.

        Raises:
            NoteNotFoundError: If note not found
        """
        note_id = NoteId.of(note_id)

        async with self.uow:
            note = await self._execute_db_operation(
                "get_note",
                self.repo.find_by_id(note_id),
            )
            if note is None:
                raise NoteNotFoundError(note_id.value)

        return note

    async def list_notes(self) -> list[Note]:
        """List all notes. No ordering is guaranteed."""
        async with self.uow:
            return await self._execute_db_operation(
                "list_notes",
                self.repo.find_all(),
            )

    async def update_note(
        self,
        note_id: NoteIdLike,
        title: str | None,
        content: str | None,
        tags: Iterable[str] | None = None,
    ) -> Note:
        """
        Replace a note's title, content and tags.

        Args:
            note_id: Note ID to update
            title: New title
            content: New content
            tags: New tags; None clears them

        Returns:
            Updated note with refreshed updated_at

        Raises:
            NoteNotFoundError: If note not found
            NoteValidationError: If title or content is missing or blank
        """
        note_id = NoteId.of(note_id)
        self._log_operation("Updating note", note_id=str(note_id))

        async with self.uow:
            existing = await self._execute_db_operation(
                "update_note",
                self.repo.find_by_id(note_id),
            )
            if existing is None:
                raise NoteNotFoundError(note_id.value)

            updated = existing.update(title, content, tags)
            saved = await self._execute_db_operation(
                "update_note",
                self.repo.save(updated),
            )
            await self._commit("update_note")

        return saved

    async def delete_note(self, note_id: NoteIdLike) -> None:
        """
        Delete a note.

        The existence check and the deletion share one unit of work.

        Raises:
            NoteNotFoundError: If note not found
        """
        note_id = NoteId.of(note_id)
        self._log_operation("Deleting note", note_id=str(note_id))

        async with self.uow:
            exists = await self._execute_db_operation(
                "delete_note",
                self.repo.exists_by_id(note_id),
            )
            if not exists:
                raise NoteNotFoundError(note_id.value)

            await self._execute_db_operation(
                "delete_note",
                self.repo.delete_by_id(note_id),
            )
            await self._commit("delete_note")
