"""
Note Domain.

Entities, value objects, and domain errors. No framework imports.
"""

from modules.backend.domain.exceptions import (
    NoteNotFoundError,
    NoteValidationError,
    ValidationKind,
)
from modules.backend.domain.note import Note, NoteId

__all__ = [
    "Note",
    "NoteId",
    "NoteNotFoundError",
    "NoteValidationError",
    "ValidationKind",
]
