"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable infrastructure:
#   moderation  - ToxicityClient (HTTP scorer or scripted mock)
#   persistence - repositories (PostgreSQL or in-memory store)
Component = Literal["moderation", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider that sets ``__mock_component__`` is the base of a swappable
    component; its subclasses are the implementations, told apart by
    ``__is_mock__``. Providers without a component are used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
