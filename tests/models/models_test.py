"""Tests for the response models and their polymorphic content items."""

import pytest
from pydantic import TypeAdapter, ValidationError

from arena_client.models import (
    Block,
    ChannelWithDetails,
    ConnectedBlock,
    ConnectedChannel,
    ContentItem,
    Embed,
    Image,
    UserWithDetails,
)

content_items = TypeAdapter(list[ContentItem])


class TestChannelWithDetails:
    """Tests for parsing channels and their contents."""

    def test_contents_are_tagged_by_base_class(self, channel_body):
        """Test that each content item parses into its variant."""
        channel = ChannelWithDetails.model_validate(channel_body)

        block, nested = channel.contents
        assert isinstance(block, ConnectedBlock)
        assert isinstance(nested, ConnectedChannel)
        assert block.position == 1
        assert nested.position == 2
        assert nested.contents is None

    def test_capability_checks(self, channel_body):
        """Test is_block and is_channel on both variants."""
        block, nested = ChannelWithDetails.model_validate(channel_body).contents
        assert block.is_block() and not block.is_channel()
        assert nested.is_channel() and not nested.is_block()

    def test_contents_none_until_fetched(self, channel_body):
        """Test that contents default to None when the server omits them."""
        del channel_body["contents"]
        assert ChannelWithDetails.model_validate(channel_body).contents is None

    def test_aliases(self, channel_body):
        """Test that reserved JSON keys map to Python attribute names."""
        channel = ChannelWithDetails.model_validate(channel_body)
        assert channel.class_ == "Channel"
        assert channel.nsfw is False
        assert channel.owner_type == "User"

    def test_video_embed_in_contents(self, channel_body):
        """Test that a Media block with a video embed parses inside contents."""
        channel_body["status"] = "closed"
        channel_body["contents"][0].update(
            {
                "class": "Media",
                "visibility": "closed",
                "embed": {
                    "type": "video",
                    "html": "<iframe src='https://player.vimeo.com/video/1'/>",
                    "width": 640,
                    "height": 360,
                },
            }
        )
        channel = ChannelWithDetails.model_validate(channel_body)

        block = channel.contents[0]
        assert channel.status == "closed"
        assert block.visibility == "closed"
        assert isinstance(block.payload(), Embed)
        assert block.payload().type == "video"

    def test_round_trip(self, channel_body):
        """Test that dumping a parsed channel reproduces the original body."""
        channel = ChannelWithDetails.model_validate(channel_body)
        assert channel.model_dump(by_alias=True, exclude_unset=True) == channel_body

    def test_unknown_fields_are_kept(self, channel_body):
        """Test that fields not declared on the model survive parsing."""
        channel_body["follower_count"] = 4
        channel_body["share_link"] = "https://are.na/share/abc"
        channel = ChannelWithDetails.model_validate(channel_body)
        assert channel.share_link == "https://are.na/share/abc"

    def test_models_are_frozen(self, channel_body):
        """Test that parsed entities cannot be mutated."""
        channel = ChannelWithDetails.model_validate(channel_body)
        with pytest.raises(ValidationError):
            channel.title = "Changed"


class TestContentItem:
    """Tests for the ContentItem tagged union."""

    def test_unknown_base_class_rejected(self, block_body, connection_data):
        """Test that an item with an unknown discriminant fails to parse."""
        item = {**block_body, **connection_data, "base_class": "Comment"}
        with pytest.raises(ValidationError):
            content_items.validate_python([item])

    def test_missing_base_class_rejected(self, block_body):
        """Test that an item without a discriminant fails to parse."""
        del block_body["base_class"]
        with pytest.raises(ValidationError):
            content_items.validate_python([block_body])

    def test_connection_data_optional_fields(self, block_body, connection_data):
        """Test the optional connection fields on a connected block."""
        item = {
            **block_body,
            **connection_data,
            "connection_id": 900,
            "connected_by_username": "Ada Lovelace",
            "connected_by_user_slug": "ada-lovelace",
        }
        (block,) = content_items.validate_python([item])
        assert block.connection_id == 900
        assert block.connected_by_user_slug == "ada-lovelace"
        assert block.selected is False


class TestBlock:
    """Tests for the Block model."""

    def test_text_payload(self, block_body):
        """Test that a Text block's payload is its markdown content."""
        block = Block.model_validate(block_body)
        assert block.payload() == "# Hello"

    def test_image_payload(self, block_body):
        """Test that an Image block's payload is its image."""
        block_body.update(
            {
                "class": "Image",
                "content": None,
                "image": {
                    "filename": "cat.png",
                    "content_type": "image/png",
                    "thumb": {"url": "https://example.com/thumb.png"},
                    "display": {"url": "https://example.com/display.png"},
                    "original": {
                        "url": "https://example.com/cat.png",
                        "file_size": 2048,
                        "file_size_display": "2 KB",
                    },
                },
            }
        )
        payload = Block.model_validate(block_body).payload()
        assert isinstance(payload, Image)
        assert payload.original.file_size == 2048
        assert payload.thumb.url == "https://example.com/thumb.png"

    def test_media_payload(self, block_body):
        """Test that a Media block's payload is its embed."""
        block_body.update(
            {"class": "Media", "embed": {"type": "rich", "html": "<iframe/>"}}
        )
        payload = Block.model_validate(block_body).payload()
        assert isinstance(payload, Embed)
        assert payload.html == "<iframe/>"

    def test_link_payload(self, block_body):
        """Test that a Link block's payload is its source."""
        block_body.update(
            {
                "class": "Link",
                "source": {
                    "url": "https://example.com/article",
                    "provider": {"name": "Example", "url": "example.com"},
                },
            }
        )
        payload = Block.model_validate(block_body).payload()
        assert payload.url == "https://example.com/article"
        assert payload.provider.name == "Example"

    def test_attachment_payload(self, block_body):
        """Test that an Attachment block's payload is its attachment."""
        block_body.update(
            {"class": "Attachment", "attachment": {"extension": "pdf", "file_size": 9}}
        )
        assert Block.model_validate(block_body).payload().extension == "pdf"

    def test_unknown_class_rejected(self, block_body):
        """Test that an unknown block class fails to parse."""
        block_body["class"] = "Video"
        with pytest.raises(ValidationError):
            Block.model_validate(block_body)

    def test_unlisted_values_are_accepted(self, block_body):
        """Test that non-discriminant fields accept values beyond the known set."""
        block_body.update({"state": "queued", "visibility": "closed"})
        block = Block.model_validate(block_body)
        assert block.state == "queued"
        assert block.visibility == "closed"

    def test_populate_by_name(self):
        """Test constructing a block with Python attribute names."""
        block = Block(id=1, class_="Text", base_class="Block", content="hi")
        assert block.model_dump(by_alias=True, exclude_unset=True) == {
            "id": 1,
            "class": "Text",
            "base_class": "Block",
            "content": "hi",
        }


class TestUserWithDetails:
    """Tests for the user model."""

    def test_profile_counters(self, user_body):
        """Test that profile counters and avatar variants are parsed."""
        user = UserWithDetails.model_validate(user_body)
        assert (user.channel_count, user.follower_count, user.following_count) == (
            3,
            8,
            5,
        )
        assert user.avatar_image.thumb.endswith("avatar-thumb.png")
        assert user.is_confirmed is True

    def test_class_defaults_to_user(self):
        """Test that the discriminant defaults when a nested user omits it."""
        user = UserWithDetails.model_validate({"id": 1})
        assert user.class_ == "User"
