"""Test container builder with selective unmocking."""

from typing import get_args

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from agora.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every mockable component is mocked by default.

    Concrete providers (config, domain services, use cases) are always the
    production ones. ``FastapiProvider`` is included so the same container
    can back a TestClient app.

    Args:
        unmock: Components that should use their production provider

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and E2E tests: in-memory store, scripted toxicity client
        container = build_test_container()

        # Integration tests: PostgreSQL, scripted toxicity client
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - set(get_args(Component))
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, use_mock=_is_mocked(base, unmock))() for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def _is_mocked(base, unmock: set[Component]) -> bool:
    component = base.__mock_component__
    return component is not None and component not in unmock
