"""Block comment models."""

from typing import Literal, Optional

from arena_client.models.base import ArenaModel
from arena_client.models.users import UserWithDetails


class CommentEntity(ArenaModel):
    """A user mention inside a comment body."""

    type: Optional[str] = None
    user_id: Optional[int] = None
    user_slug: Optional[str] = None
    user_name: Optional[str] = None
    start: Optional[int] = None
    end: Optional[int] = None


class Comment(ArenaModel):
    """A comment left on a block."""

    id: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    commentable_id: Optional[int] = None
    commentable_type: Optional[str] = None
    body: Optional[str] = None
    user_id: Optional[int | str] = None
    deleted: Optional[bool] = None
    entities: list[CommentEntity] = []
    base_class: Literal["Comment"] = "Comment"
    user: Optional[UserWithDetails] = None
