"""
Note Domain Entity.

Immutable note entity and its identity value object. A note is never
mutated in place: update() returns a new snapshot that keeps the id and
created_at of the original.

Usage:
    from modules.backend.domain.note import Note

    note = Note.create("Groceries", "Milk, eggs", ["home"])
    edited = note.update("Groceries", "Milk, eggs, bread", ["home"])
    assert edited == note  # same identity
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from uuid import UUID, uuid4

from modules.backend.core.utils import utc_now
from modules.backend.domain.exceptions import NoteValidationError, ValidationKind


@dataclass(frozen=True)
class NoteId:
    """Globally unique note identifier wrapping a UUID."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError("NoteId value must be a UUID")

    @classmethod
    def generate(cls) -> "NoteId":
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def of(cls, value: "NoteId | UUID | str") -> "NoteId":
        """
        Wrap an existing identifier.

        Args:
            value: A NoteId, a UUID, or the canonical UUID string

        Raises:
            ValueError: If a string value is not a valid UUID
            TypeError: If value is None or of an unsupported type
        """
        if isinstance(value, NoteId):
            return value
        if isinstance(value, str):
            return cls(UUID(value))
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)


# Non-breaking spaces and NEL are content, not blank
_NON_BLANK_SPACES = frozenset("\u00a0\u2007\u202f\x85")


def is_blank(value: str) -> bool:
    """True if value is empty or holds only breaking whitespace."""
    return all(ch.isspace() and ch not in _NON_BLANK_SPACES for ch in value)


def validate_title(title: str | None) -> None:
    """Raise NoteValidationError unless title is a non-blank string."""
    if not isinstance(title, str) or is_blank(title):
        raise NoteValidationError(ValidationKind.TITLE_REQUIRED)


def validate_content(content: str | None) -> None:
    """Raise NoteValidationError unless content is a non-blank string."""
    if not isinstance(content, str) or is_blank(content):
        raise NoteValidationError(ValidationKind.CONTENT_REQUIRED)


def _normalize_tags(tags: Iterable[str] | None) -> tuple[str, ...]:
    """
    Copy tags into a tuple, keeping order and duplicates.

    Raises:
        TypeError: If tags is a bare string or holds a non-string item
    """
    if tags is None:
        return ()
    if isinstance(tags, (str, bytes)):
        raise TypeError("tags must be a sequence of strings, not a single string")
    normalized = tuple(tags)
    for tag in normalized:
        if not isinstance(tag, str):
            raise TypeError(f"tag must be a string, got {type(tag).__name__}")
    return normalized


@dataclass(frozen=True, eq=False)
class Note:
    """
    A titled, tagged text entry.

    Identity is the id alone: two snapshots of the same note compare
    equal and hash alike regardless of their other fields.

    Build instances through the factories:
    - create(): new note, validated, fresh id and timestamps
    - reconstitute(): rehydrate trusted stored data, no validation
    """

    id: NoteId
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _normalize_tags(self.tags))

    @classmethod
    def create(
        cls,
        title: str | None,
        content: str | None,
        tags: Iterable[str] | None = None,
    ) -> "Note":
        """
        Create a new note.

        Args:
            title: Note title, must not be blank
            content: Note body, must not be blank
            tags: Optional tags; None becomes an empty tuple

        Returns:
            New note with generated id and created_at == updated_at

        Raises:
            NoteValidationError: If title or content is missing or blank
        """
        validate_title(title)
        validate_content(content)

        now = utc_now()
        return cls(
            id=NoteId.generate(),
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
            tags=_normalize_tags(tags),
        )

    @classmethod
    def reconstitute(
        cls,
        id: NoteId,
        title: str,
        content: str,
        created_at: datetime,
        updated_at: datetime,
        tags: Iterable[str] | None,
    ) -> "Note":
        """Rebuild a note from storage. Values are trusted and not validated."""
        return cls(
            id=id,
            title=title,
            content=content,
            created_at=created_at,
            updated_at=updated_at,
            tags=_normalize_tags(tags),
        )

    def update(
        self,
        title: str | None,
        content: str | None,
        tags: Iterable[str] | None = None,
    ) -> "Note":
        """
        Return an updated snapshot of this note.

        Keeps id and created_at; updated_at always moves forward, even
        if the clock has not ticked since the previous write.

        Raises:
            NoteValidationError: If title or content is missing or blank
        """
        validate_title(title)
        validate_content(content)

        now = utc_now()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)

        return replace(
            self,
            title=title,
            content=content,
            updated_at=now,
            tags=_normalize_tags(tags),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
