"""Channel models without contents."""

from typing import Literal, Optional

from pydantic import Field

from arena_client.models.base import ArenaModel, Metadata

ChannelStatus = Literal["private", "closed", "public"]


class Channel(ArenaModel):
    """A user- or group-owned ordered collection of blocks and channels."""

    id: int
    """The internal ID of the channel."""

    title: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    added_to_at: Optional[str] = None
    """Timestamp when the channel was last added to."""

    published: Optional[bool] = None
    """Whether the channel is visible to all members of Are.na."""

    open: Optional[bool] = None
    """Whether other members may add blocks to the channel."""

    collaboration: Optional[bool] = None
    """Whether the channel has collaborators."""

    slug: Optional[str] = None
    """Slug used in the channel URL (e.g. arena-influences)."""

    length: Optional[int] = None
    """Number of items in the channel (blocks and other channels)."""

    kind: Optional[str] = None
    """Either default (a standard channel) or profile (a user's own channel)."""

    status: Optional[str] = None
    """Who may read and add to the channel: private, closed or public."""

    state: Optional[str] = None
    nsfw: Optional[bool] = Field(default=None, alias="nsfw?")
    metadata: Optional[Metadata] = None

    user_id: Optional[int] = None
    """Internal ID of the channel author."""

    class_: Literal["Channel"] = Field(alias="class")
    base_class: Literal["Channel"]

    def is_block(self) -> bool:
        return False

    def is_channel(self) -> bool:
        return True


class OwnerInfo(ArenaModel):
    """Who owns a channel: a user or a group."""

    owner_type: Optional[str] = None
    owner_id: Optional[int | str] = None
    owner_slug: Optional[str] = None


class OwnedChannel(Channel, OwnerInfo):
    """A channel with its owner, as returned when creating a channel."""
