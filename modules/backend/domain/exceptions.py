"""
Note Domain Exceptions.

The only two error kinds the note domain raises. Both are client errors
(bad input or a stale id) and are never retried.
"""

from enum import Enum
from uuid import UUID

from modules.backend.core.exceptions import NotFoundError, ValidationError


class ValidationKind(str, Enum):
    """Which note field failed validation."""

    TITLE_REQUIRED = "TitleRequired"
    CONTENT_REQUIRED = "ContentRequired"


_VALIDATION_MESSAGES: dict[ValidationKind, tuple[str, str, str]] = {
    ValidationKind.TITLE_REQUIRED: ("title", "Title is required", "VAL_TITLE_REQUIRED"),
    ValidationKind.CONTENT_REQUIRED: ("content", "Content is required", "VAL_CONTENT_REQUIRED"),
}


class NoteValidationError(ValidationError):
    """Raised when a note is created or updated with a missing or blank field."""

    def __init__(self, kind: ValidationKind) -> None:
        field, message, code = _VALIDATION_MESSAGES[kind]
        self.kind = kind
        self.field = field
        super().__init__(
            message,
            details={"field": field, "kind": kind.value},
            code=code,
        )


class NoteNotFoundError(NotFoundError):
    """Raised when an operation addresses a note id absent from the store."""

    def __init__(self, note_id: UUID | str) -> None:
        self.note_id = note_id
        super().__init__(f"Note not found with id: {note_id}")
