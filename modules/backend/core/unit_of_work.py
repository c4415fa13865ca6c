"""
Unit of Work.

Transactional boundary around a single use case. Either every repository
effect of the call is committed, or none is.

Usage:
    async with uow:
        note = Note.create(title, content, tags)
        saved = await repo.save(note)
        await uow.commit()

Leaving the block with an exception rolls back. Leaving it normally
without calling commit() also rolls back, so read-only use cases never
write.
"""

from abc import ABC, abstractmethod
from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession

from modules.backend.core.logging import get_logger

logger = get_logger(__name__)


class UnitOfWork(ABC):
    """Unit of Work interface (port)."""

    def __init__(self) -> None:
        self._committed = False

    @abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all changes made within the unit of work."""
        raise NotImplementedError

    async def commit(self) -> None:
        """Persist all changes made within the unit of work."""
        await self._commit()
        self._committed = True

    async def __aenter__(self) -> "UnitOfWork":
        self._committed = False
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if exc_type is not None or not self._committed:
            await self.rollback()


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work bound to a SQLAlchemy async session."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__()
        self._session = session

    async def _commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        if self._session.in_transaction():
            logger.debug("Rolling back unit of work")
            await self._session.rollback()
