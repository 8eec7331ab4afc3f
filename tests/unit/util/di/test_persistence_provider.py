"""Unit tests for the request-scoped session lifecycle."""

import pytest
from dishka import Scope, make_async_container, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from agora.util.di.core import ProdConfigProvider
from agora.util.di.infrastructure import ProdPersistenceProvider


class RecordingSession:
    """Stands in for AsyncSession, recording how the request ended."""

    def __init__(self, log: list[str]) -> None:
        self.log = log

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.log.append("close")

    def in_transaction(self) -> bool:
        return True

    async def commit(self) -> None:
        self.log.append("commit")

    async def rollback(self) -> None:
        self.log.append("rollback")


class RecordingPersistenceProvider(ProdPersistenceProvider):
    """Production session handling on top of recording sessions."""

    def __init__(self, log: list[str]) -> None:
        super().__init__()
        self.log = log

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        return lambda: RecordingSession(self.log)


@pytest.fixture
def session_log():
    return []


@pytest.fixture
def container(session_log):
    return make_async_container(
        ProdConfigProvider(), RecordingPersistenceProvider(session_log)
    )


class TestRequestSession:
    """Tests for ProdPersistenceProvider.get_session."""

    @pytest.mark.asyncio
    async def test_commits_when_request_succeeds(self, container, session_log):
        async with container() as request_container:
            await request_container.get(AsyncSession)

        await container.close()

        assert session_log == ["commit", "close"]

    @pytest.mark.asyncio
    async def test_rolls_back_when_request_fails(self, container, session_log):
        """A failure after a write must not leave the write committed."""
        with pytest.raises(RuntimeError):
            async with container() as request_container:
                await request_container.get(AsyncSession)
                raise RuntimeError("re-fetch failed after insert")

        await container.close()

        assert session_log == ["rollback", "close"]
