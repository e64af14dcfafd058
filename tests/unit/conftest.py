"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching real databases.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from notes_api.repositories.note import NoteRepository


# =============================================================================
# Database Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_db_session() -> AsyncMock:
    """
    Mock database session for unit tests.

    Usage:
        def test_repository(mock_db_session: AsyncMock):
            repo = NoteRepository(mock_db_session)
    """
    session = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_note_repo() -> AsyncMock:
    """
    Mock note repository for service tests.

    Usage:
        async def test_get(mock_note_repo):
            mock_note_repo.find_by_id.return_value = note
            service = NoteService(mock_note_repo)
    """
    repo = AsyncMock(spec=NoteRepository)
    repo.not_found_message = NoteRepository.not_found_message
    return repo

