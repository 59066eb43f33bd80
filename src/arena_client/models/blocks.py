"""Block models.

A block's `class` tag says what kind of content it holds, and with it which
of the optional payload fields is populated.
"""

from typing import Literal, Optional

from pydantic import Field

from arena_client.models.base import ArenaModel
from arena_client.models.channels import Channel
from arena_client.models.media import Attachment, BlockSource, Embed, Image
from arena_client.models.users import UserWithDetails

BlockClass = Literal["Image", "Text", "Link", "Media", "Attachment"]


class Block(ArenaModel):
    """A single piece of content authored by a user."""

    id: int
    """The internal ID of the block."""

    title: Optional[str] = None
    updated_at: Optional[str] = None
    created_at: Optional[str] = None

    state: Optional[str] = None
    """Processing lifecycle: available, processing, processed, failure or
    remote_processing."""

    visibility: Optional[str] = None
    """Visibility of a newly created block, e.g. private or public."""

    comment_count: Optional[int] = None

    generated_title: Optional[str] = None
    """The title, or a truncation of the description or content, or "Untitled"."""

    class_: BlockClass = Field(alias="class")
    base_class: Literal["Block"]

    content: Optional[str] = None
    """Text content as markdown (Text blocks)."""

    content_html: Optional[str] = None
    """Text content as HTML (Text blocks)."""

    description: Optional[str] = None
    """Caption of the block as markdown."""

    description_html: Optional[str] = None
    """Caption of the block as HTML."""

    source: Optional[BlockSource] = None
    image: Optional[Image] = None
    user: Optional[UserWithDetails] = None
    attachment: Optional[Attachment] = None
    embed: Optional[Embed] = None

    def is_block(self) -> bool:
        return True

    def is_channel(self) -> bool:
        return False

    def payload(self) -> Image | Embed | Attachment | BlockSource | str | None:
        """Return the payload matching this block's class.

        Image blocks carry an image, Media blocks an embed, Attachment blocks an
        attachment, Link blocks a source and Text blocks markdown content.
        """
        if self.class_ == "Image":
            return self.image
        if self.class_ == "Media":
            return self.embed
        if self.class_ == "Attachment":
            return self.attachment
        if self.class_ == "Link":
            return self.source
        return self.content


class BlockWithConnections(Block):
    """A block together with the channels it appears in."""

    connections: list[Channel] = []
