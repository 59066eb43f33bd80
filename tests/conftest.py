"""Shared test fixtures and configuration for the arena-client test suite."""

from unittest.mock import AsyncMock

import httpx
import pytest

from arena_client.api import ArenaClient


class FakeClock:
    """Clock frozen at a fixed epoch-millisecond value."""

    def __init__(self, value: int = 12345):
        self.value = value

    def now(self) -> int:
        return self.value


@pytest.fixture
def fake_clock() -> FakeClock:
    """Create a clock that always reports 12345.

    Returns:
        FakeClock: Deterministic time source for cache-busting parameters.
    """
    return FakeClock()


@pytest.fixture
def transport() -> AsyncMock:
    """Create a transport answering every request with 200 and a small JSON body.

    Returns:
        AsyncMock: Awaitable transport whose calls can be inspected.
    """
    return AsyncMock(return_value=httpx.Response(200, json={"some": "data"}))


@pytest.fixture
def client(transport, fake_clock) -> ArenaClient:
    """Create an authenticated client wired to the fake transport and clock.

    Returns:
        ArenaClient: Client using token MY_API_TOKEN.
    """
    return ArenaClient(token="MY_API_TOKEN", transport=transport, clock=fake_clock)


@pytest.fixture
def user_body() -> dict:
    """Create a user payload as returned by `GET users/{id}`.

    Returns:
        dict: JSON body of a user with details.
    """
    return {
        "id": 17,
        "slug": "ada-lovelace",
        "username": "Ada Lovelace",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "avatar": "https://example.com/avatar.png",
        "avatar_image": {
            "display": "https://example.com/avatar-display.png",
            "thumb": "https://example.com/avatar-thumb.png",
        },
        "channel_count": 3,
        "following_count": 5,
        "follower_count": 8,
        "profile_id": 99,
        "class": "User",
        "base_class": "User",
        "initials": "AL",
        "is_premium": False,
        "is_confirmed": True,
        "metadata": {"description": None},
    }


@pytest.fixture
def block_body(user_body) -> dict:
    """Create a Text block payload as returned by `GET blocks/{id}`.

    Returns:
        dict: JSON body of a Text block.
    """
    return {
        "id": 101,
        "title": "Notes",
        "created_at": "2024-01-02T10:00:00.000Z",
        "updated_at": "2024-01-03T10:00:00.000Z",
        "state": "available",
        "comment_count": 0,
        "generated_title": "Notes",
        "class": "Text",
        "base_class": "Block",
        "content": "# Hello",
        "content_html": "<h1>Hello</h1>",
        "description": None,
        "description_html": None,
        "source": None,
        "image": None,
        "user": user_body,
    }


@pytest.fixture
def connection_data() -> dict:
    """Create the connection fields attached to items inside a channel.

    Returns:
        dict: Connection metadata.
    """
    return {
        "position": 1,
        "selected": False,
        "connected_at": "2024-01-04T10:00:00.000Z",
        "connected_by_user_id": 17,
    }


@pytest.fixture
def nested_channel_body(connection_data) -> dict:
    """Create a channel payload as it appears inside another channel.

    Returns:
        dict: JSON body of a connected channel whose contents are not loaded.
    """
    return {
        "id": 8,
        "title": "Sub Channel",
        "slug": "sub-channel",
        "status": "closed",
        "kind": "default",
        "length": 0,
        "user_id": 17,
        "class": "Channel",
        "base_class": "Channel",
        "contents": None,
        **connection_data,
        "position": 2,
    }


@pytest.fixture
def channel_body(block_body, connection_data, nested_channel_body) -> dict:
    """Create a channel payload as returned by `GET channels/{slug}`.

    Returns:
        dict: JSON body of a channel whose contents hold a block and a channel.
    """
    return {
        "id": 7,
        "title": "Arena Influences",
        "created_at": "2024-01-01T10:00:00.000Z",
        "updated_at": "2024-01-04T10:00:00.000Z",
        "published": True,
        "open": False,
        "collaboration": False,
        "slug": "arena-influences",
        "length": 2,
        "kind": "default",
        "status": "public",
        "nsfw?": False,
        "user_id": 17,
        "class": "Channel",
        "base_class": "Channel",
        "owner_type": "User",
        "owner_id": 17,
        "contents": [{**block_body, **connection_data}, nested_channel_body],
    }
