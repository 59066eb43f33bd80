"""Connection metadata overlaid on blocks and channels."""

from typing import Optional

from arena_client.models.base import ArenaModel


class ConnectionData(ArenaModel):
    """How an item sits inside a parent channel.

    Only ever mixed into `ConnectedBlock` and `ConnectedChannel`; the API
    never returns it on its own.
    """

    position: Optional[int] = None
    """Position of the item inside the channel."""

    selected: Optional[bool] = None
    """Whether the item is featured inside the channel."""

    connected_at: Optional[str] = None
    """Time when the item was connected to the channel."""

    connected_by_user_id: Optional[int] = None
    """ID of the user who connected the item to the channel."""

    connection_id: Optional[int] = None
    connected_by_username: Optional[str] = None
    connected_by_user_slug: Optional[str] = None
