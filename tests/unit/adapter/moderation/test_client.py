"""Unit tests for the HTTP toxicity scorer client."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import Response

from agora.adapter.moderation import HttpToxicityClient
from agora.domain.error import ModerationUnavailableError

SCORER_URL = "http://scorer.test/predict"


@pytest.fixture
def client():
    return HttpToxicityClient(url=SCORER_URL, timeout_seconds=2.5)


class TestHttpToxicityClient:
    """Tests for HttpToxicityClient.score."""

    @pytest.mark.asyncio
    async def test_returns_verdict(self, client):
        """Should parse the scorer's verdict verbatim."""
        body = {"allowed": False, "scores": {"toxic": 0.93, "insult": 0.41}}

        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = Response(200, json=body)

            verdict = await client.score("you are awful")

            assert verdict.allowed is False
            assert verdict.scores == {"toxic": 0.93, "insult": 0.41}
            mock_client.post.assert_called_once_with(
                SCORER_URL, json={"text": "you are awful"}
            )
            mock_client_class.assert_called_once_with(timeout=2.5)

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.side_effect = httpx.ReadTimeout("too slow")

            with pytest.raises(ModerationUnavailableError):
                await client.score("hello")

    @pytest.mark.asyncio
    async def test_connection_error_is_unavailable(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.side_effect = httpx.ConnectError("refused")

            with pytest.raises(ModerationUnavailableError):
                await client.score("hello")

    @pytest.mark.asyncio
    async def test_error_status_is_unavailable(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.return_value = Response(500, text="boom")

            with pytest.raises(ModerationUnavailableError):
                await client.score("hello")

    @pytest.mark.asyncio
    async def test_malformed_body_is_unavailable(self, client):
        """Should reject bodies that are not JSON or miss the verdict."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.post.side_effect = [
                Response(200, text="not json"),
                Response(200, json={"scores": {"toxic": 0.1}}),
            ]

            with pytest.raises(ModerationUnavailableError):
                await client.score("first")
            with pytest.raises(ModerationUnavailableError):
                await client.score("second")
