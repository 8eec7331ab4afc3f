"""Toxicity moderation gate."""

import logfire

from agora.config import ModerationSettings
from agora.domain.error import ModerationUnavailableError
from agora.domain.value import ModerationVerdict

from .base import Service


class ToxicityClient:
    """Interface to an external toxicity scorer."""

    async def score(self, text: str) -> ModerationVerdict:
        """Ask the scorer for a verdict on a piece of text.

        Args:
            text: Text to classify

        Returns:
            The scorer's verdict, verbatim

        Raises:
            ModerationUnavailableError: If no verdict could be obtained
        """
        raise NotImplementedError


class ModerationService(Service):
    """Domain service gating user text through the toxicity scorer.

    When the scorer cannot be reached the gate fails open by default:
    text is allowed without scores and the failure is only logged.
    ``fail_open=False`` inverts that and surfaces the failure instead.
    """

    def __init__(self, client: ToxicityClient, settings: ModerationSettings) -> None:
        """Initialize moderation service.

        Args:
            client: Toxicity scorer client
            settings: Moderation settings
        """
        self.client = client
        self.settings = settings

    async def check_toxicity(self, text: str) -> ModerationVerdict:
        """Check a piece of text against the toxicity scorer.

        Args:
            text: Text to check

        Returns:
            Verdict with allowed flag and scores (None if not scored)

        Raises:
            ModerationUnavailableError: If the scorer failed and the gate is
                configured to fail closed
        """
        if not self.settings.enabled:
            return ModerationVerdict(allowed=True, scores=None)

        with logfire.span("moderation_service.check_toxicity", length=len(text)):
            try:
                verdict = await self.client.score(text)
            except ModerationUnavailableError as e:
                if not self.settings.fail_open:
                    logfire.error("Toxicity scorer unavailable", error=str(e))
                    raise
                logfire.warn(
                    "Toxicity scorer unavailable, allowing content", error=str(e)
                )
                return ModerationVerdict(allowed=True, scores=None)

            if verdict.allowed and self._exceeds_threshold(verdict):
                verdict = ModerationVerdict(allowed=False, scores=verdict.scores)

            if not verdict.allowed:
                logfire.info("Content rejected by moderation", scores=verdict.scores)
            return verdict

    def _exceeds_threshold(self, verdict: ModerationVerdict) -> bool:
        threshold = self.settings.block_threshold
        if threshold is None or not verdict.scores:
            return False
        return any(score > threshold for score in verdict.scores.values())
