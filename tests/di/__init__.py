"""Mock providers for testing."""

from .moderation import MockModerationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockModerationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
