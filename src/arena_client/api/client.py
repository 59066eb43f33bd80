"""Client for interacting with the Are.na REST API."""

import json
import logging
from typing import Any, Mapping

from arena_client.api.errors import HttpError
from arena_client.api.pagination import (
    PaginationAttributes,
    pagination_query_string,
    search_query_string,
)
from arena_client.api.resources import (
    BlockApi,
    ChannelApi,
    GroupApi,
    SearchApi,
    UserApi,
)
from arena_client.api.transport import (
    Clock,
    HttpxTransport,
    SystemClock,
    Transport,
    TransportResponse,
)
from arena_client.config import Config
from arena_client.models import ChannelsPage, Me

logger = logging.getLogger(__name__)


def _encode_body(data: Mapping[str, Any] | None) -> bytes | None:
    """Serialize a request body, dropping fields whose value is None."""
    if not data:
        return None
    payload = {key: value for key, value in data.items() if value is not None}
    return json.dumps(payload).encode("utf-8")


def _is_success(response: TransportResponse) -> bool:
    return 200 <= response.status_code < 300


class ArenaClient:
    """Async client for the Are.na API.

    Resource accessors such as `channel(slug)` return small immutable bundles
    of operations bound to one identifier; no request is made until one of
    those operations is awaited. The transport and clock are injected, so the
    client holds no state beyond its fixed configuration and independent
    calls may run concurrently.
    """

    def __init__(
        self,
        token: str | None = None,
        transport: Transport | None = None,
        clock: Clock | None = None,
        base_url: str = Config.API_BASE_URL,
    ):
        """Initialize the API client.

        Args:
            token: Bearer token attached to every request. Without one the
                Authorization header is sent empty and only public data is
                readable.
            transport: Async callable performing the HTTP requests. Defaults to
                an httpx-backed transport.
            clock: Time source for cache-busting `date` parameters.
            base_url: API root that relative endpoint paths are appended to. A
                trailing slash is added when missing.
        """
        self.base_url: str = base_url.rstrip("/") + "/"
        self.token: str | None = token
        self.transport: Transport = transport or HttpxTransport()
        self.clock: Clock = clock or SystemClock()
        self._headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}" if token else "",
        }

    async def _send(
        self, method: str, endpoint: str, data: Mapping[str, Any] | None = None
    ) -> TransportResponse:
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)
        response = await self.transport(
            method, url, headers=dict(self._headers), content=_encode_body(data)
        )
        if not _is_success(response):
            logger.warning(
                "%s %s failed with status %s %s",
                method,
                url,
                response.status_code,
                response.reason_phrase,
            )
            raise HttpError(response.reason_phrase, response.status_code)
        return response

    async def get_json(self, endpoint: str) -> Any:
        """GET an endpoint and return its decoded JSON body.

        Args:
            endpoint: Path relative to the API root, query string included.

        Raises:
            HttpError: If the API answers with a non-2xx status.
        """
        response = await self._send("GET", endpoint)
        return response.json()

    async def post_json(
        self, endpoint: str, data: Mapping[str, Any] | None = None
    ) -> Any:
        """POST a JSON body and return the decoded JSON response.

        Raises:
            HttpError: If the API answers with a non-2xx status.
        """
        response = await self._send("POST", endpoint, data)
        return response.json()

    async def put_json(
        self, endpoint: str, data: Mapping[str, Any] | None = None
    ) -> None:
        """PUT a JSON body. The response body is discarded.

        Raises:
            HttpError: If the API answers with a non-2xx status.
        """
        await self._send("PUT", endpoint, data)

    async def delete(self, endpoint: str) -> None:
        """DELETE an endpoint. The response body is discarded.

        Raises:
            HttpError: If the API answers with a non-2xx status.
        """
        await self._send("DELETE", endpoint)

    def paginated(
        self, endpoint: str, options: PaginationAttributes | None = None
    ) -> str:
        """Append the pagination query string to an endpoint path."""
        query = pagination_query_string(options, self.clock)
        return f"{endpoint}?{query}" if query else endpoint

    def searching(
        self,
        endpoint: str,
        term: str,
        options: PaginationAttributes | None = None,
    ) -> str:
        """Append a search query string to an endpoint path."""
        return f"{endpoint}?{search_query_string(term, options, self.clock)}"

    async def me(self) -> Me:
        """Fetch the authenticated user.

        Raises:
            HttpError: With status 401 when the client has no valid token.
        """
        return Me.model_validate(await self.get_json("me"))

    async def channels(
        self, pagination: PaginationAttributes | None = None
    ) -> ChannelsPage:
        """List channels visible to the authenticated user."""
        data = await self.get_json(self.paginated("channels", pagination))
        return ChannelsPage.model_validate(data)

    def user(self, user_id: int | str) -> UserApi:
        """Operations on the user with the given ID or slug."""
        return UserApi(self, user_id)

    def group(self, slug: str) -> GroupApi:
        """Operations on the group with the given slug."""
        return GroupApi(self, slug)

    def channel(self, slug: str) -> ChannelApi:
        """Operations on the channel with the given slug."""
        return ChannelApi(self, slug)

    def block(self, block_id: int | str) -> BlockApi:
        """Operations on the block with the given ID."""
        return BlockApi(self, block_id)

    @property
    def search(self) -> SearchApi:
        """Search operations across users, channels and blocks."""
        return SearchApi(self)
