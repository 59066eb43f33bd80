"""Pagination options and query-string encoding for list endpoints.

Caller options are merged over the defaults field by field, then emitted in a
fixed order: `page`, `per`, `sort`, `direction`, and finally `date` when a
cache refresh is forced.
"""

from typing import Literal, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from arena_client.api.transport import Clock, SystemClock
from arena_client.config import Config


class PaginationAttributes(BaseModel):
    """Options available for paginating requests to list endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    per: Optional[int] = None
    """Number of items returned per page."""

    page: Optional[int] = None
    """The page to fetch."""

    sort: Optional[str] = None
    """The field to sort results by."""

    direction: Optional[Literal["asc", "desc"]] = None
    """The direction of returned results."""

    force_refresh: Optional[bool] = Field(default=None, alias="forceRefresh")
    """Bypass the server cache by appending a `date` parameter."""


DEFAULT_PAGINATION = PaginationAttributes(
    per=Config.DEFAULT_PER_PAGE,
    sort=Config.DEFAULT_SORT,
    direction=Config.DEFAULT_DIRECTION,
)

_QUERY_FIELDS = ("page", "per", "sort", "direction")


def merge_pagination(
    options: PaginationAttributes | None = None,
    defaults: PaginationAttributes = DEFAULT_PAGINATION,
) -> PaginationAttributes:
    """Overlay caller options on the defaults.

    Fields the caller leaves as None keep their default value.

    Args:
        options: Caller-supplied options, possibly partial.
        defaults: Values used for every field the caller omits.

    Returns:
        The merged pagination options.
    """
    if options is None:
        return defaults
    overrides = options.model_dump(exclude_none=True)
    return defaults.model_copy(update=overrides)


def _encode(key: str, value: object) -> str:
    return f"{key}={quote(str(value), safe='')}"


def pagination_query_string(
    options: PaginationAttributes | None = None,
    clock: Clock | None = None,
    defaults: PaginationAttributes = DEFAULT_PAGINATION,
) -> str:
    """Build the query string for a paginated request.

    Args:
        options: Caller-supplied pagination options.
        clock: Time source for the `date` parameter. Defaults to wall-clock time.
        defaults: Values used for every field the caller omits.

    Returns:
        Parameters joined with "&", without a leading "?". Empty when no
        parameter resolves to a truthy value.
    """
    merged = merge_pagination(options, defaults)
    params = [
        _encode(name, getattr(merged, name))
        for name in _QUERY_FIELDS
        if getattr(merged, name)
    ]
    if merged.force_refresh:
        params.append(_encode("date", (clock or SystemClock()).now()))
    return "&".join(params)


def search_query_string(
    term: str,
    options: PaginationAttributes | None = None,
    clock: Clock | None = None,
    defaults: PaginationAttributes = DEFAULT_PAGINATION,
) -> str:
    """Build the query string for a search request.

    The search term comes first as `q`, followed by the pagination parameters.

    Args:
        term: The search term.
        options: Caller-supplied pagination options.
        clock: Time source for the `date` parameter.
        defaults: Values used for every field the caller omits.

    Returns:
        The encoded query string, without a leading "?".
    """
    query = _encode("q", term)
    pagination = pagination_query_string(options, clock, defaults)
    if pagination:
        return f"{query}&{pagination}"
    return query
