"""Group models."""

from typing import Literal, Optional

from pydantic import Field

from arena_client.models.base import ArenaModel
from arena_client.models.users import UserWithDetails


class Group(ArenaModel):
    """A group of users that can own channels."""

    id: int
    class_: Literal["Group"] = Field(default="Group", alias="class")
    base_class: Literal["Group"] = "Group"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    visibility: Optional[int] = None
    slug: Optional[str] = None


class GroupWithDetails(Group):
    """A group with its membership lists."""

    title: Optional[str] = None
    user: Optional[UserWithDetails] = None
    """The group owner."""

    users: list[UserWithDetails] = []
    member_ids: list[int] = []
    accessible_by_ids: list[int] = []
    published: Optional[bool] = None
