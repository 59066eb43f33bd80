"""Envelope models for list, search and account endpoints."""

from typing import Literal, Optional

from pydantic import Field

from arena_client.models.base import ArenaModel
from arena_client.models.blocks import Block
from arena_client.models.channels import Channel, OwnedChannel
from arena_client.models.comments import Comment
from arena_client.models.contents import ChannelWithDetails, ContentItem
from arena_client.models.users import User, UserWithDetails


class Page(ArenaModel):
    """Pagination counters shared by list responses."""

    length: Optional[int] = None
    total_pages: Optional[int] = None
    current_page: Optional[int] = None
    per: Optional[int] = None


class ListedChannel(ChannelWithDetails):
    """A channel as listed by `GET channels`."""

    per: Optional[int] = None
    page: Optional[int] = None
    owner: Optional[UserWithDetails] = None
    collaborators: Optional[list[User]] = None


class Me(UserWithDetails):
    """The authenticated user, with their channels."""

    channels: list[ListedChannel] = []


class ChannelsPage(Page):
    """Response of `GET channels`."""

    channels: list[ListedChannel] = []


class UserChannelsPage(Page):
    """Response of `GET users/{id}/channels`."""

    class_: Optional[Literal["User"]] = Field(default=None, alias="class")
    base_class: Optional[Literal["User"]] = None
    channels: list[ChannelWithDetails] = []


class UsersPage(Page):
    """Response of `GET users/{id}/following` and `GET users/{id}/followers`."""

    class_: Optional[Literal["User"]] = Field(default=None, alias="class")
    base_class: Optional[Literal["User"]] = None
    users: list[UserWithDetails] = []


class GroupChannelsPage(Page):
    """Response of `GET groups/{slug}/channels`."""

    channel_title: Optional[str] = None
    channels: list[ChannelWithDetails] = []


class BlockChannelsPage(Page):
    """Response of `GET blocks/{id}/channels`."""

    channels: list[OwnedChannel] = []


class CommentsPage(Page):
    """Response of `GET blocks/{id}/comments`."""

    channel_title: Optional[str] = None
    comments: list[Comment] = []


class ChannelContents(ArenaModel):
    """Response of `GET channels/{slug}/contents`."""

    contents: list[ContentItem] = []


class SearchResults(Page):
    """Response of the search endpoints."""

    term: Optional[str] = None
    authenticated: Optional[bool] = None
    channels: list[Channel] = []
    blocks: list[Block] = []
    users: list[UserWithDetails] = []
