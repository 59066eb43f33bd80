"""Channel contents: blocks and nested channels decorated with connection data."""

from typing import Annotated, Optional, Union

from pydantic import Field

from arena_client.models.blocks import Block
from arena_client.models.channels import Channel, OwnerInfo
from arena_client.models.connections import ConnectionData
from arena_client.models.groups import Group
from arena_client.models.users import UserWithDetails


class ChannelWithDetails(Channel, OwnerInfo):
    """A channel with its author and, once fetched, its contents."""

    user: Optional[UserWithDetails] = None
    group: Optional[Group] = None
    follower_count: Optional[int] = None
    can_index: Optional[bool] = None

    contents: Optional[list["ContentItem"]] = None
    """Blocks and channels in the channel, or None until fetched."""


class ConnectedBlock(Block, ConnectionData):
    """A block as it appears inside a channel."""


class ConnectedChannel(ChannelWithDetails, ConnectionData):
    """A channel as it appears inside another channel."""


ContentItem = Annotated[
    Union[ConnectedBlock, ConnectedChannel], Field(discriminator="base_class")
]
"""One entry of a channel listing, tagged by its `base_class`."""

ChannelWithDetails.model_rebuild()
ConnectedChannel.model_rebuild()
