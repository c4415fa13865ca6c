"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from modules.backend.core.unit_of_work import UnitOfWork
from modules.backend.repositories.base import NoteRepository


# =============================================================================
# Unit of Work Fixtures
# =============================================================================


class FakeUnitOfWork(UnitOfWork):
    """In-memory unit of work that records commits and rollbacks."""

    def __init__(self) -> None:
        super().__init__()
        self.commits = 0
        self.rollbacks = 0

    async def _commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """
    Unit of work double for service tests.

    Usage:
        async def test_create(note_service, fake_uow):
            await note_service.create_note("T", "C")
            assert fake_uow.commits == 1
    """
    return FakeUnitOfWork()


# =============================================================================
# Repository Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_note_repository() -> AsyncMock:
    """
    Mock NoteRepository port.

    Every port method is an AsyncMock. save() echoes the note it is given.
    """
    repo = AsyncMock(spec=NoteRepository)
    repo.save.side_effect = lambda note: note
    repo.find_by_id.return_value = None
    repo.find_all.return_value = []
    repo.exists_by_id.return_value = False
    repo.delete_by_id.return_value = None
    return repo


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Provides a fully mocked AsyncSession with common methods.
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock(return_value=None)
    session.add = MagicMock()
    session.in_transaction = MagicMock(return_value=True)
    return session


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            with patch("module.get_logger", return_value=mock_logger):
                # Test code that logs
                mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
