"""
Stockroom Backend — Database Helper Tests
===========================================

What:  Tests for the per-request session dependency and the row helper.
How:   The session factory is patched with a mock so no database is needed
       for the dependency; fetch_rows runs against the seeded SQLite engine.
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.database import fetch_rows, get_db_session


def _factory_yielding(session):
    """A stand-in for async_session_factory whose context manager yields ``session``."""
    context = MagicMock()
    context.__aenter__.return_value = session
    context.__aexit__.return_value = False
    return MagicMock(return_value=context)


class TestGetDbSession:
    """Tests for the get_db_session dependency."""

    @pytest.mark.asyncio
    async def test_yields_session_and_closes(self, mock_db_session):
        with patch("stockroom.database.async_session_factory", _factory_yielding(mock_db_session)):
            dependency = get_db_session()
            session = await dependency.__anext__()

            assert session is mock_db_session

            with pytest.raises(StopAsyncIteration):
                await dependency.__anext__()

        mock_db_session.rollback.assert_not_awaited()
        mock_db_session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rolls_back_and_reraises_on_error(self, mock_db_session):
        with patch("stockroom.database.async_session_factory", _factory_yielding(mock_db_session)):
            dependency = get_db_session()
            await dependency.__anext__()

            with pytest.raises(RuntimeError, match="handler failed"):
                await dependency.athrow(RuntimeError("handler failed"))

        mock_db_session.rollback.assert_awaited_once()
        mock_db_session.close.assert_awaited_once()


class TestFetchRows:
    """Tests for fetch_rows against a real database."""

    @pytest.mark.asyncio
    async def test_returns_plain_dicts(self, seeded_engine):
        async with AsyncSession(seeded_engine) as session:
            rows = await fetch_rows(
                session, "SELECT id, item FROM stuff WHERE id = :id", {"id": 2}
            )

        assert rows == [{"id": 2, "item": "Nail"}]
        assert type(rows[0]) is dict

    @pytest.mark.asyncio
    async def test_without_params(self, seeded_engine):
        async with AsyncSession(seeded_engine) as session:
            rows = await fetch_rows(session, "SELECT COUNT(*) AS total FROM stuff")

        assert rows == [{"total": 2}]
