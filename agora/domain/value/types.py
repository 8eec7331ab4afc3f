"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from agora.domain.value.common import RootValueObject, ValueObject


class Role(str, Enum):
    """Role claim carried by a user's credential."""

    USER = "user"
    MODERATOR = "moderator"

    @classmethod
    def parse(cls, value: str | None) -> "Role":
        """Parse a requested role, falling back to a plain user."""
        try:
            return cls(value) if value else cls.USER
        except ValueError:
            return cls.USER


class LikeTarget(str, Enum):
    """Type of entity that can be liked."""

    POST = "post"
    COMMENT = "comment"


class Username(RootValueObject[str]):
    """Public user name.

    3-50 characters: letters, digits and underscores.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters: letters, numbers and underscores"
            )
        return v


class CommunityName(RootValueObject[str]):
    """Community name.

    3-100 characters: letters, digits, spaces, hyphens and underscores.
    Surrounding whitespace is stripped.
    """

    @field_validator("root")
    @classmethod
    def validate_community_name(cls, v: str) -> str:
        """Validate community name format."""
        v = v.strip()
        if len(v) < 3 or len(v) > 100:
            raise ValueError("Community name must be between 3 and 100 characters")
        if not re.match(r"^[a-zA-Z0-9\s\-_]+$", v):
            raise ValueError(
                "Community name can only contain letters, numbers, spaces, "
                "hyphens, and underscores"
            )
        return v


class ModerationVerdict(ValueObject):
    """Outcome of the toxicity check for a piece of text.

    ``scores`` is None when the scorer was not consulted or could not be
    reached.
    """

    allowed: bool
    scores: dict[str, float] | None = None
