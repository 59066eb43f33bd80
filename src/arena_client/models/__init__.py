"""Typed models for Are.na API responses."""

from arena_client.models.blocks import (
    Block,
    BlockClass,
    BlockWithConnections,
)
from arena_client.models.channels import (
    Channel,
    ChannelStatus,
    OwnedChannel,
    OwnerInfo,
)
from arena_client.models.comments import Comment, CommentEntity
from arena_client.models.connections import ConnectionData
from arena_client.models.contents import (
    ChannelWithDetails,
    ConnectedBlock,
    ConnectedChannel,
    ContentItem,
)
from arena_client.models.groups import Group, GroupWithDetails
from arena_client.models.media import Attachment, BlockSource, Embed, Image
from arena_client.models.responses import (
    BlockChannelsPage,
    ChannelContents,
    ChannelsPage,
    CommentsPage,
    GroupChannelsPage,
    ListedChannel,
    Me,
    SearchResults,
    UserChannelsPage,
    UsersPage,
)
from arena_client.models.users import User, UserWithDetails

__all__ = [
    "Attachment",
    "Block",
    "BlockChannelsPage",
    "BlockClass",
    "BlockSource",
    "BlockWithConnections",
    "Channel",
    "ChannelContents",
    "ChannelStatus",
    "ChannelWithDetails",
    "ChannelsPage",
    "Comment",
    "CommentEntity",
    "CommentsPage",
    "ConnectedBlock",
    "ConnectedChannel",
    "ConnectionData",
    "ContentItem",
    "Embed",
    "Group",
    "GroupChannelsPage",
    "GroupWithDetails",
    "Image",
    "ListedChannel",
    "Me",
    "OwnedChannel",
    "OwnerInfo",
    "SearchResults",
    "User",
    "UserChannelsPage",
    "UserWithDetails",
    "UsersPage",
]
