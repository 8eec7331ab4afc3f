"""Like repository interface."""

from abc import ABC, abstractmethod

from agora.domain.value import LikeTarget, UserId


class LikeRepository(ABC):
    """Repository for (target, user) like presence records.

    Posts and comments keep their likes in separate join tables, each with
    a unique (target, user) constraint. The target type selects the table.
    """

    @abstractmethod
    async def lock_target(self, target: LikeTarget, target_id: int) -> bool:
        """Lock the liked entity's row for the rest of the transaction.

        Serializes concurrent toggles on the same target.

        Args:
            target: Type of the liked entity
            target_id: ID of the liked entity

        Returns:
            True if the entity exists, False otherwise
        """
        pass

    @abstractmethod
    async def add(self, target: LikeTarget, target_id: int, user_id: UserId) -> bool:
        """Insert a like if absent.

        Returns:
            True if a row was inserted, False if the pair already existed
        """
        pass

    @abstractmethod
    async def remove(
        self, target: LikeTarget, target_id: int, user_id: UserId
    ) -> bool:
        """Delete a like if present.

        Returns:
            True if a row was deleted, False if no like existed
        """
        pass

    @abstractmethod
    async def count(self, target: LikeTarget, target_id: int) -> int:
        """Count likes on a target."""
        pass
