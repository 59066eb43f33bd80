"""Operation bundles bound to a single Are.na resource.

Each bundle is a frozen dataclass holding the client and one identifier.
Building a bundle never performs I/O; requests happen when an operation is
awaited.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Sequence

from pydantic import TypeAdapter

from arena_client.api.pagination import PaginationAttributes
from arena_client.models import (
    BlockChannelsPage,
    BlockWithConnections,
    ChannelContents,
    ChannelStatus,
    ChannelWithDetails,
    Comment,
    CommentsPage,
    ConnectedBlock,
    ConnectedChannel,
    ContentItem,
    GroupChannelsPage,
    GroupWithDetails,
    SearchResults,
    UserChannelsPage,
    UsersPage,
    UserWithDetails,
)

if TYPE_CHECKING:
    from arena_client.api.client import ArenaClient

_content_items = TypeAdapter(list[ContentItem])


@dataclass(frozen=True)
class UserApi:
    """Read-only operations on one user."""

    client: "ArenaClient"
    user_id: int | str

    async def get(self) -> UserWithDetails:
        data = await self.client.get_json(f"users/{self.user_id}")
        return UserWithDetails.model_validate(data)

    async def channels(
        self, pagination: PaginationAttributes | None = None
    ) -> UserChannelsPage:
        endpoint = self.client.paginated(f"users/{self.user_id}/channels", pagination)
        return UserChannelsPage.model_validate(await self.client.get_json(endpoint))

    async def following(self) -> UsersPage:
        data = await self.client.get_json(f"users/{self.user_id}/following")
        return UsersPage.model_validate(data)

    async def followers(self) -> UsersPage:
        data = await self.client.get_json(f"users/{self.user_id}/followers")
        return UsersPage.model_validate(data)


@dataclass(frozen=True)
class GroupApi:
    """Read-only operations on one group."""

    client: "ArenaClient"
    slug: str

    async def get(self) -> GroupWithDetails:
        data = await self.client.get_json(f"groups/{self.slug}")
        return GroupWithDetails.model_validate(data)

    async def channels(
        self, pagination: PaginationAttributes | None = None
    ) -> GroupChannelsPage:
        endpoint = self.client.paginated(f"groups/{self.slug}/channels", pagination)
        return GroupChannelsPage.model_validate(await self.client.get_json(endpoint))


@dataclass(frozen=True)
class ChannelConnectApi:
    """Connect existing blocks or channels into a channel."""

    client: "ArenaClient"
    slug: str

    async def _connect(
        self, connectable_type: Literal["Block", "Channel"], connectable_id: int | str
    ):
        return await self.client.post_json(
            f"channels/{self.slug}/connections",
            {"connectable_type": connectable_type, "connectable_id": connectable_id},
        )

    async def block(self, block_id: int | str) -> ConnectedBlock:
        """Connect a block into the channel."""
        return ConnectedBlock.model_validate(await self._connect("Block", block_id))

    async def channel(self, channel_id: int | str) -> ConnectedChannel:
        """Connect another channel into the channel."""
        data = await self._connect("Channel", channel_id)
        return ConnectedChannel.model_validate(data)


@dataclass(frozen=True)
class ChannelDisconnectApi:
    """Remove connections from a channel."""

    client: "ArenaClient"
    slug: str

    async def block(self, block_id: int | str) -> None:
        """Remove a block from the channel. The block itself is not deleted."""
        await self.client.delete(f"channels/{self.slug}/blocks/{block_id}")

    async def channel(self, channel_id: int | str) -> None:
        """Not supported by the API.

        Raises:
            NotImplementedError: Always, without making a request.
        """
        raise NotImplementedError("Method Not Implemented")


@dataclass(frozen=True)
class ChannelApi:
    """Operations on one channel, identified by its slug."""

    client: "ArenaClient"
    slug: str

    @property
    def connect(self) -> ChannelConnectApi:
        return ChannelConnectApi(self.client, self.slug)

    @property
    def disconnect(self) -> ChannelDisconnectApi:
        return ChannelDisconnectApi(self.client, self.slug)

    async def get(
        self, pagination: PaginationAttributes | None = None
    ) -> ChannelWithDetails:
        """Fetch the channel with one page of its contents."""
        endpoint = self.client.paginated(f"channels/{self.slug}", pagination)
        return ChannelWithDetails.model_validate(await self.client.get_json(endpoint))

    async def create(self, status: ChannelStatus | None = None) -> ChannelWithDetails:
        """Create a new channel titled with this accessor's slug."""
        data = await self.client.post_json(
            "channels", {"title": self.slug, "status": status}
        )
        return ChannelWithDetails.model_validate(data)

    async def update(self, title: str, status: ChannelStatus | None = None) -> None:
        await self.client.put_json(
            f"channels/{self.slug}", {"title": title, "status": status}
        )

    async def delete(self) -> None:
        await self.client.delete(f"channels/{self.slug}")

    async def thumb(self) -> ChannelWithDetails:
        """Fetch a lightweight summary of the channel."""
        data = await self.client.get_json(f"channels/{self.slug}/thumb")
        return ChannelWithDetails.model_validate(data)

    async def contents(
        self, pagination: PaginationAttributes | None = None
    ) -> ChannelContents:
        endpoint = self.client.paginated(f"channels/{self.slug}/contents", pagination)
        return ChannelContents.model_validate(await self.client.get_json(endpoint))

    async def create_block(
        self,
        source: str | None = None,
        content: str | None = None,
        description: str | None = None,
    ) -> ConnectedBlock:
        """Create a block inside the channel from a URL or text content."""
        data = await self.client.post_json(
            f"channels/{self.slug}/blocks",
            {"source": source, "content": content, "description": description},
        )
        return ConnectedBlock.model_validate(data)

    async def connections(
        self, pagination: PaginationAttributes | None = None
    ) -> list[ContentItem]:
        """List the blocks and channels connected to the channel."""
        endpoint = self.client.paginated(
            f"channels/{self.slug}/connections", pagination
        )
        return _content_items.validate_python(await self.client.get_json(endpoint))

    async def sort(self, ids: Sequence[int | str]) -> None:
        """Reorder the channel's contents to follow the given item IDs."""
        await self.client.put_json(f"channels/{self.slug}/sort", {"ids": list(ids)})


@dataclass(frozen=True)
class BlockApi:
    """Operations on one block."""

    client: "ArenaClient"
    block_id: int | str

    async def get(self) -> BlockWithConnections:
        data = await self.client.get_json(f"blocks/{self.block_id}")
        return BlockWithConnections.model_validate(data)

    async def channels(
        self, pagination: PaginationAttributes | None = None
    ) -> BlockChannelsPage:
        """List the channels the block is connected to."""
        endpoint = self.client.paginated(f"blocks/{self.block_id}/channels", pagination)
        return BlockChannelsPage.model_validate(await self.client.get_json(endpoint))

    async def update(
        self,
        title: str | None = None,
        description: str | None = None,
        content: str | None = None,
    ) -> None:
        """Update the given fields of the block, leaving the others untouched."""
        await self.client.put_json(
            f"blocks/{self.block_id}",
            {"title": title, "description": description, "content": content},
        )

    async def comments(
        self, pagination: PaginationAttributes | None = None
    ) -> CommentsPage:
        endpoint = self.client.paginated(f"blocks/{self.block_id}/comments", pagination)
        return CommentsPage.model_validate(await self.client.get_json(endpoint))

    async def comment(self, body: str) -> Comment:
        """Leave a comment on the block."""
        data = await self.client.post_json(
            f"blocks/{self.block_id}/comments", {"body": body}
        )
        return Comment.model_validate(data)


@dataclass(frozen=True)
class SearchApi:
    """Full-text search over users, channels and blocks."""

    client: "ArenaClient"

    async def _search(
        self, endpoint: str, query: str, pagination: PaginationAttributes | None
    ) -> SearchResults:
        data = await self.client.get_json(
            self.client.searching(endpoint, query, pagination)
        )
        return SearchResults.model_validate(data)

    async def everything(
        self, query: str, pagination: PaginationAttributes | None = None
    ) -> SearchResults:
        return await self._search("search", query, pagination)

    async def users(
        self, query: str, pagination: PaginationAttributes | None = None
    ) -> SearchResults:
        return await self._search("search/users", query, pagination)

    async def channels(
        self, query: str, pagination: PaginationAttributes | None = None
    ) -> SearchResults:
        return await self._search("search/channels", query, pagination)

    async def blocks(
        self, query: str, pagination: PaginationAttributes | None = None
    ) -> SearchResults:
        return await self._search("search/blocks", query, pagination)
