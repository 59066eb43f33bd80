"""Media payloads carried by blocks: images, attachments, embeds and sources."""

from typing import Optional

from arena_client.models.base import ArenaModel


class ImageUrl(ArenaModel):
    """A single resized image variant."""

    url: str


class OriginalImage(ArenaModel):
    """The original upload with its size."""

    url: str
    file_size: Optional[int] = None
    file_size_display: Optional[str] = None


class Image(ArenaModel):
    """An image stored on Are.na, with its resized variants."""

    filename: Optional[str] = None
    """Name of the file as it appears on the Are.na filesystem."""

    content_type: Optional[str] = None
    """MIME type of the image (e.g. 'image/png')."""

    updated_at: Optional[str] = None
    """Timestamp of the last time the file was updated."""

    thumb: Optional[ImageUrl] = None
    """Thumbnail sized image (200x200)."""

    display: Optional[ImageUrl] = None
    """Display sized image, at most 600px wide or tall."""

    large: Optional[ImageUrl] = None
    square: Optional[ImageUrl] = None

    original: Optional[OriginalImage] = None
    """The original image, with its file size."""


class Attachment(ArenaModel):
    """A file attached to an Attachment block."""

    content_type: Optional[str] = None
    extension: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    file_size_display: Optional[str] = None
    url: Optional[str] = None


class Embed(ArenaModel):
    """oEmbed payload of a Media block."""

    author_name: Optional[str] = None
    author_url: Optional[str] = None
    height: Optional[int] = None
    html: Optional[str] = None
    source_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    title: Optional[str] = None
    type: Optional[str] = None
    """oEmbed type: photo, video, link or rich."""
    url: Optional[str] = None
    width: Optional[int] = None


class Provider(ArenaModel):
    """The site a Link block points at."""

    name: Optional[str] = None
    url: Optional[str] = None


class BlockSource(ArenaModel):
    """Where the content of a block was taken from."""

    url: Optional[str] = None
    title: Optional[str] = None
    provider: Optional[Provider] = None
