"""Unit tests for the ownership check."""

import pytest

from agora.domain.error import NotAuthorizedError
from agora.domain.service import ensure_owner
from agora.domain.value import UserId


class TestEnsureOwner:
    """Tests for ensure_owner."""

    def test_owner_passes(self):
        ensure_owner("post", 3, UserId(1), UserId(1))

    def test_other_user_is_rejected(self):
        with pytest.raises(NotAuthorizedError) as exc_info:
            ensure_owner("comment", 9, UserId(1), UserId(2))

        assert exc_info.value.resource == "comment"
        assert exc_info.value.resource_id == 9
        assert exc_info.value.user_id == 2
        assert str(exc_info.value) == "Not authorized to modify this comment"
