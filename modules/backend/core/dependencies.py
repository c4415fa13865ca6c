"""
FastAPI Dependencies.

Shared dependencies for request handling, including the wiring of the
note service to its SQLAlchemy adapters.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.database import get_db_session
from modules.backend.core.unit_of_work import SqlAlchemyUnitOfWork
from modules.backend.repositories.note import SqlAlchemyNoteRepository
from modules.backend.services.note import NoteService

# Type alias for database session dependency
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_request_id(request: Request) -> str:
    """
    Get the request ID assigned by RequestContextMiddleware.

    Falls back to the X-Request-ID header, then to a fresh UUID, when
    the middleware is not installed.
    """
    request_id = getattr(request.state, "request_id", None)
    return request_id or request.headers.get("x-request-id") or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


async def get_note_service(db: DbSession) -> NoteService:
    """Build a NoteService bound to the request's database session."""
    return NoteService(
        repository=SqlAlchemyNoteRepository(db),
        uow=SqlAlchemyUnitOfWork(db),
    )


NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]
