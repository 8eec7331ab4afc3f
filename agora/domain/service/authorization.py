"""Ownership checks for mutating owned resources."""

import logfire

from agora.domain.error import NotAuthorizedError
from agora.domain.value import UserId


def ensure_owner(
    resource: str, resource_id: int, owner_id: UserId, user_id: UserId
) -> None:
    """Require that a user owns the resource they are about to change.

    Applied to every edit/delete of a comment, post or community.

    Args:
        resource: Resource name used in the error message (e.g. "comment")
        resource_id: ID of the resource
        owner_id: The resource's owner (author or community creator)
        user_id: The acting user

    Raises:
        NotAuthorizedError: If the acting user is not the owner
    """
    if owner_id != user_id:
        logfire.warn(
            "Ownership check failed",
            resource=resource,
            resource_id=resource_id,
            user_id=user_id,
        )
        raise NotAuthorizedError(resource, resource_id, user_id)
