"""
Note Repository Port.

Storage-agnostic contract the note service depends on. Concrete
implementations live next to this module (see repositories/note.py)
and can be swapped without touching the service.
"""

from abc import ABC, abstractmethod

from modules.backend.domain.note import Note, NoteId


class NoteRepository(ABC):
    """
    Persistence contract for notes.

    Implementations must honor:
    - save() is an upsert keyed by note id
    - find_by_id() returns None for a missing note, never raises
    - find_all() makes no ordering promise
    - delete_by_id() is safe to call for a missing note
    """

    @abstractmethod
    async def save(self, note: Note) -> Note:
        """Insert the note, or overwrite the stored note with the same id."""
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, note_id: NoteId) -> Note | None:
        """Load a note by id, or None if it is not stored."""
        raise NotImplementedError

    @abstractmethod
    async def find_all(self) -> list[Note]:
        """Load every stored note; empty list when the store is empty."""
        raise NotImplementedError

    @abstractmethod
    async def exists_by_id(self, note_id: NoteId) -> bool:
        """Check whether a note is stored without loading it."""
        raise NotImplementedError

    @abstractmethod
    async def delete_by_id(self, note_id: NoteId) -> None:
        """Remove a note. No-op when it is already absent."""
        raise NotImplementedError
