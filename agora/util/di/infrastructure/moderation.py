"""Moderation infrastructure providers."""

from dishka import Scope, provide

from agora.adapter.moderation import HttpToxicityClient
from agora.config import ModerationSettings
from agora.domain.service import ToxicityClient
from agora.util.di.base import ProviderBase


class ModerationProvider(ProviderBase):
    """Moderation component base."""

    __mock_component__ = "moderation"


class ProdModerationProvider(ModerationProvider):
    """Production moderation provider calling the toxicity scorer over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_toxicity_client(self, settings: ModerationSettings) -> ToxicityClient:
        """Provide toxicity scorer client.

        Returns:
            HTTP toxicity client configured from moderation settings
        """
        return HttpToxicityClient(
            url=settings.url,
            timeout_seconds=settings.timeout_seconds,
        )
