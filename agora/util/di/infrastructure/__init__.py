"""Infrastructure providers."""

# Import bases
from .moderation import ModerationProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .moderation import ProdModerationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ModerationProvider",
    "PersistenceProvider",
    "ProdModerationProvider",
    "ProdPersistenceProvider",
]
