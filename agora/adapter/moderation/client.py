"""Toxicity scorer client implementation.

The scorer is an HTTP service that accepts ``{"text": ...}`` and answers
``{"allowed": bool, "scores": {label: probability}}``.
"""

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from agora.domain.error import ModerationUnavailableError
from agora.domain.service.moderation_service import ToxicityClient
from agora.domain.value import ModerationVerdict


class HttpToxicityClient(ToxicityClient):
    """Toxicity client calling the scorer over HTTP.

    Makes a single attempt per call with a bounded timeout. Every failure
    (transport error, timeout, non-2xx status, malformed body) is reported
    as ModerationUnavailableError so the gate can apply its policy.
    """

    def __init__(self, url: str, timeout_seconds: float) -> None:
        """Initialize toxicity client.

        Args:
            url: Scoring endpoint URL
            timeout_seconds: Total timeout for one scoring request
        """
        self.url = url
        self.timeout_seconds = timeout_seconds

    async def score(self, text: str) -> ModerationVerdict:
        """Send text to the scorer and return its verdict verbatim.

        Args:
            text: Text to classify

        Returns:
            Verdict parsed from the scorer's response

        Raises:
            ModerationUnavailableError: If no valid verdict was received
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(self.url, json={"text": text})
        except httpx.TimeoutException as e:
            logfire.error("Toxicity scorer timed out", url=self.url)
            raise ModerationUnavailableError("Toxicity scorer timed out") from e
        except httpx.HTTPError as e:
            logfire.error("Toxicity scorer HTTP error", url=self.url, error=str(e))
            raise ModerationUnavailableError(f"Toxicity scorer unreachable: {e}") from e

        if not response.is_success:
            logfire.error(
                "Toxicity scorer returned error status",
                status_code=response.status_code,
                error=response.text,
            )
            raise ModerationUnavailableError(
                f"Toxicity scorer returned {response.status_code}"
            )

        try:
            return ModerationVerdict.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logfire.error("Malformed toxicity scorer response", error=str(e))
            raise ModerationUnavailableError(
                "Malformed toxicity scorer response"
            ) from e


class MockToxicityClient(ToxicityClient):
    """Mock toxicity client for testing.

    Returns a fixed verdict, or raises a fixed error, without network calls.
    Texts it was asked to score are recorded in ``calls``.
    """

    def __init__(
        self,
        verdict: ModerationVerdict | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialize mock client.

        Args:
            verdict: Verdict to return (allowed, no scores by default)
            error: Error to raise instead of returning a verdict
        """
        self.verdict = verdict or ModerationVerdict(allowed=True, scores={})
        self.error = error
        self.calls: list[str] = []

    async def score(self, text: str) -> ModerationVerdict:
        """Return the configured verdict or raise the configured error."""
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.verdict
