"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, own the transactional boundary, and
implement business rules.

Usage:
    from modules.backend.services.base import BaseService

    class NoteService(BaseService):
        def __init__(self, repository: NoteRepository, uow: UnitOfWork) -> None:
            super().__init__(uow)
            self.repo = repository

        async def create_note(self, title: str, content: str) -> Note:
            async with self.uow:
                note = Note.create(title, content)
                saved = await self._execute_db_operation("create_note", self.repo.save(note))
                await self._commit("create_note")
            return saved
"""

from collections.abc import Awaitable
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from modules.backend.core.exceptions import ConflictError, DatabaseError
from modules.backend.core.logging import get_logger
from modules.backend.core.unit_of_work import UnitOfWork

logger = get_logger(__name__)

T = TypeVar("T")


class BaseService:
    """
    Base class for all services.

    Provides:
    - Unit of work access
    - Logging context
    - Error wrapping for database operations

    Subclasses should:
    - Call super().__init__(uow) in their __init__
    - Keep repositories as attributes
    - Run each use case inside `async with self.uow:`
    """

    def __init__(self, uow: UnitOfWork) -> None:
        """
        Initialize the service with a unit of work.

        Args:
            uow: Transactional boundary wrapping each use case
        """
        self._uow = uow
        self._logger = get_logger(self.__class__.__module__)

    @property
    def uow(self) -> UnitOfWork:
        """Get the unit of work."""
        return self._uow

    async def _execute_db_operation(
        self,
        operation: str,
        coro: Awaitable[T],
    ) -> T:
        """
        Execute a database operation with error handling.

        Wraps database operations to convert SQLAlchemy exceptions
        to application-specific exceptions. Domain errors pass through.

        Args:
            operation: Description of the operation for logging
            coro: Awaitable to execute

        Returns:
            Result of the awaitable

        Raises:
            ConflictError: For unique constraint violations
            DatabaseError: For other database errors
        """
        try:
            return await coro
        except IntegrityError as e:
            self._logger.warning(
                "Database integrity error",
                extra={"operation": operation, "error": str(e)},
            )
            error_str = str(e).lower()
            if "unique" in error_str or "duplicate" in error_str:
                raise ConflictError("Resource already exists") from e
            raise DatabaseError(f"Database constraint violation: {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Database error",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Database operation failed: {operation}") from e

    async def _commit(self, operation: str) -> None:
        """Commit the current unit of work with database error handling."""
        await self._execute_db_operation(operation, self._uow.commit())

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
