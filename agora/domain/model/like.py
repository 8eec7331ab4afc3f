"""Like toggle result."""

from pydantic import Field

from agora.domain.model.common import DomainModel


class LikeState(DomainModel):
    """State of a (target, user) like pair after a toggle."""

    liked: bool
    count: int = Field(ge=0)
