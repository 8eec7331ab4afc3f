"""Like use cases."""

from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase

__all__ = ["ToggleLikeRequest", "ToggleLikeResponse", "ToggleLikeUseCase"]
