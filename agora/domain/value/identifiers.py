"""Strongly typed identifiers for Agora domain entities.

Identifiers are integers assigned by the database. NewType keeps the
different entity IDs from being mixed up.
"""

from typing import NewType

UserId = NewType("UserId", int)
CommunityId = NewType("CommunityId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
