"""User models."""

from typing import Literal, Optional

from pydantic import Field

from arena_client.models.base import ArenaModel, Metadata


class AvatarImage(ArenaModel):
    """URLs of the user's avatar variants."""

    display: Optional[str] = None
    thumb: Optional[str] = None


class User(ArenaModel):
    """An Are.na user and their profile counters."""

    id: int
    """The internal ID of the user."""

    slug: Optional[str] = None
    """Slug of the user, also used for their default profile channel."""

    username: Optional[str] = None
    """Currently equivalent to the full name."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None

    avatar: Optional[str] = None
    """The gravatar URL to the user's avatar."""

    avatar_image: Optional[AvatarImage] = None

    channel_count: Optional[int] = None
    """Number of channels the user owns or collaborates on."""

    following_count: Optional[int] = None
    """Number of channels and users the user follows."""

    follower_count: Optional[int] = None
    """Number of users following the user."""

    profile_id: Optional[int] = None
    """Internal ID of the user's profile channel."""

    initials: Optional[str] = None

    class_: Literal["User"] = Field(default="User", alias="class")

    base_class: Literal["User"] = "User"


class UserWithDetails(User):
    """A user with account flags, as returned by the user endpoints."""

    can_index: Optional[bool] = None
    badge: Optional[str] = None
    created_at: Optional[str] = None
    is_confirmed: Optional[bool] = None
    is_exceeding_private_connections_limit: Optional[bool] = None
    is_lifetime_premium: Optional[bool] = None
    is_pending_confirmation: Optional[bool] = None
    is_pending_reconfirmation: Optional[bool] = None
    is_premium: Optional[bool] = None
    is_supporter: Optional[bool] = None
    metadata: Optional[Metadata] = None
